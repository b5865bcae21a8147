from menu_portal.domain.models import MenuEntry


# Fixed at authoring time. Ids are what the page keys cards on.
CATALOG: tuple[MenuEntry, ...] = (
    MenuEntry(id=1, name="Hyderabadi Chicken Biryani"),
    MenuEntry(id=2, name="Vegetable Dum Biryani"),
    MenuEntry(id=3, name="Chapathi with Paneer Butter Masala"),
    MenuEntry(id=4, name="Chapathi with Chicken Chettinad"),
    MenuEntry(id=5, name="Gourmet Mini Sliders"),
    MenuEntry(id=6, name="Artisan Cheese Board"),
)

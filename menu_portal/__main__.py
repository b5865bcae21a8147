import uvicorn

from menu_portal.app import CONFIG


if __name__ == "__main__":
    uvicorn.run("menu_portal.app:app", host=CONFIG.host, port=CONFIG.port)

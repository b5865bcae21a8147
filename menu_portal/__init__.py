"""Menu portal. Renders the catering menu and backfills each dish with an
AI-written description and an AI-generated photo.

Nothing here is stored. The menu is fixed, the words and pictures come from
Gemini every time the page is opened, and a dish that fails to generate just
keeps a fallback.
"""

# photo_api/__init__.py
"""
API de usuarios y fotos.

`photo_api.main:app` es la app ASGI que levanta uvicorn;
`create_app()` arma una nueva (tests, scripts).
"""

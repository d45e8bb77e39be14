# run_dev.py
import socket

from photo_api.core.config import settings


def _lan_ip() -> str:
    """Obtiene IP LAN real sin depender de hostname/DNS."""
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "127.0.0.1"


def main():
    import uvicorn

    print(f"🔗 API local: http://127.0.0.1:{settings.PORT}")
    print(f"📱 API LAN:   http://{_lan_ip()}:{settings.PORT}")
    if not settings.JWT_SECRET_KEY:
        print("⚠️ JWT_SECRET_KEY no definido: las rutas protegidas de /photo van a fallar")

    uvicorn.run(
        "photo_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=15,
        log_level=settings.LOG_LEVEL,
        lifespan="on",
    )


if __name__ == "__main__":
    main()

"""Run the API with uvicorn: ``python -m citei``."""


def main() -> None:
    """Start uvicorn serving citei.main:app."""
    import uvicorn

    from .config import HOST, PORT, LOG_LEVEL

    uvicorn.run("citei.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

import uvicorn

from airport_lookup.config import settings


def main():
    uvicorn.run("airport_lookup.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

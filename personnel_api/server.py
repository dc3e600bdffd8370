import uvicorn

from personnel_api.core.config import settings


def main():
    uvicorn.run("personnel_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()

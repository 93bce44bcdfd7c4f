import uvicorn

from crust_crumb.core.config import PORT


def main():
    uvicorn.run("crust_crumb.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()

import uvicorn

from estate_pricing.config import settings

if __name__ == "__main__":
    uvicorn.run("estate_pricing.main:app", host=settings.host, port=settings.port, reload=settings.debug)

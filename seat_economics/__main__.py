"""Allow running as: python -m seat_economics"""

import uvicorn

from seat_economics.main import settings

if __name__ == "__main__":
    uvicorn.run("seat_economics.main:app", host=settings.host, port=settings.port)

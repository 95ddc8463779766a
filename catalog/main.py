# catalog/main.py
import uvicorn

from catalog.api import create_app
from catalog.utils.settings import API_HOST, API_PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)

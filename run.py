from unlock_api import create_app
from unlock_api.config import port

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=port)

import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def main():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    print(f"Server running on port {port}")
    uvicorn.run("frontdesk_api.main:app", host=host, port=port)


if __name__ == "__main__":
    main()

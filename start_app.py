import os

from dotenv import load_dotenv

load_dotenv(os.getenv("QUESTIONS_DOTENV", ".env"))

from app import app  # noqa: E402

if __name__ == '__main__':
    host = os.getenv('HOST', '127.0.0.1')
    port = int(os.getenv('PORT', 3000))
    debug = os.getenv('DEBUG', 'False').lower() == 'true'

    print(f"Starting question search on {host}:{port}")
    print(f"\nAccess URL: http://{host}:{port}/api/questions?term=")

    app.run(host=host, port=port, debug=debug, threaded=True)

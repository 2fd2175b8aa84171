"""
Newsdesk Server
===============

Run with:
    python app.py

Visit:
    http://localhost:3000/api        - Welcome message
    http://localhost:3000/api/news   - News items
"""

from newsdesk import create_app

app = create_app()


if __name__ == '__main__':
    port = app.config['PORT']
    print("\n" + "=" * 60)
    print("Newsdesk")
    print("=" * 60)
    print(f"Server is running on http://localhost:{port}")
    print(f"News API:        http://localhost:{port}/api/news")
    print(f"Images:          http://localhost:{port}/images/")
    print("=" * 60 + "\n")

    app.run(host=app.config['HOST'], port=port)

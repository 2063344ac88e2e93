"""
Fixed content of the example files written into every new project.
"""

import json

from ..constants import (
    CLI_EXAMPLE_FILE,
    FASTAPI_APP_FILE,
    FLASK_APP_FILE,
    NOTEBOOK_FILE,
    PINNED_REQUIREMENTS,
    STREAMLIT_APP_FILE,
)

CLI_EXAMPLE = '''"""Minimal command-line app."""

import argparse


def main():
    parser = argparse.ArgumentParser(description="Example command-line app")
    parser.add_argument("name", nargs="?", default="world", help="Who to greet")
    args = parser.parse_args()
    print(f"Hello, {args.name}!")


if __name__ == "__main__":
    main()
'''

FLASK_APP = '''"""Minimal Flask app. Run with: flask --app flask/app.py run"""

from flask import Flask

app = Flask(__name__)


@app.route("/")
def index():
    return {"message": "Hello from Flask"}


if __name__ == "__main__":
    app.run(debug=True)
'''

FASTAPI_APP = '''"""Minimal FastAPI app. Run with: uvicorn main:app --reload --app-dir fastapi"""

from typing import Optional

from fastapi import FastAPI

app = FastAPI()


@app.get("/")
def read_root():
    return {"message": "Hello from FastAPI"}


@app.get("/items/{item_id}")
def read_item(item_id: int, q: Optional[str] = None):
    return {"item_id": item_id, "q": q}
'''

STREAMLIT_APP = '''"""Minimal Streamlit app. Run with: streamlit run streamlit/app.py"""

import streamlit as st

st.title("Hello from Streamlit")

name = st.text_input("Your name", value="world")
st.write(f"Hello, {name}!")

count = st.slider("Pick a number", 0, 100, 25)
st.write("Square:", count * count)
'''

NOTEBOOK = json.dumps(
    {
        "cells": [
            {
                "cell_type": "markdown",
                "metadata": {},
                "source": ["# Example notebook"],
            },
            {
                "cell_type": "code",
                "execution_count": None,
                "metadata": {},
                "outputs": [],
                "source": ['print("Hello from the notebook")'],
            },
        ],
        "metadata": {
            "kernelspec": {
                "display_name": "Python 3",
                "language": "python",
                "name": "python3",
            },
            "language_info": {"name": "python"},
        },
        "nbformat": 4,
        "nbformat_minor": 5,
    },
    indent=1,
) + "\n"

# Relative path -> content, in the order files are written
EXAMPLE_FILES = {
    CLI_EXAMPLE_FILE: CLI_EXAMPLE,
    FLASK_APP_FILE: FLASK_APP,
    FASTAPI_APP_FILE: FASTAPI_APP,
    STREAMLIT_APP_FILE: STREAMLIT_APP,
    NOTEBOOK_FILE: NOTEBOOK,
}


def requirements_text() -> str:
    """Manifest content: one `package==version` line per pinned package."""
    return "".join(f"{name}=={version}\n" for name, version in PINNED_REQUIREMENTS)

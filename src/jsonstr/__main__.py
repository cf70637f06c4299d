from jsonstr.cli import app

if __name__ == "__main__":  # pragma: no cover
    app(prog_name="json-to-string")

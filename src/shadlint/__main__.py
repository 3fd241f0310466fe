from shadlint.cli import app

app()

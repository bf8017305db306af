from extally.main import app

app(prog_name="extally")

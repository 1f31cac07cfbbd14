from slidepuzzle_cli.main import app

app(prog_name="slidepuzzle")

from projexts.cli import app

app(prog_name="projexts")

from baas.cli import app

app(prog_name="baas")

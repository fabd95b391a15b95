from k3sargo.cli import app

app(prog_name="k3sargo")

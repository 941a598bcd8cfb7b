from .main import app

app(prog_name="git-commit-mcp")

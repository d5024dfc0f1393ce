# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create the virtual environment and install ringbridge with dev extras."""
    ctx.run("uv venv")
    ctx.run("uv pip install -e '.[dev]'")


@task
def lint(ctx):
    """
    Static checks: ruff lint and format check, then mypy over the package.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def fmt(ctx):
    """Apply ruff formatting and autofixes."""
    ctx.run("ruff check --fix src tests", pty=True)
    ctx.run("ruff format src tests", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=ringbridge --cov-report=term-missing", pty=True)


@task
def sync_example(ctx):
    """Run one reconciliation pass against the bundled example snapshot."""
    ctx.run("ringbridge sync examples/home.yaml", pty=True)


@task
def build(ctx):
    """
    Build sdist and wheel into dist/.
    """
    ctx.run("rm -rf dist")
    ctx.run("uv build")

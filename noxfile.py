import nox

nox.options.sessions = [
    "style",
    "lints",
    "typing",
    "tests",
]


SOURCES = (
    "noxfile.py",
    "src",
    "tests",
)


class Requirements:
    NOX = "nox~=2024.10.9"
    PYRIGHT = "basedpyright==1.26.0"
    PYTEST = "pytest~=8.3"
    RUFF = "ruff==0.9.3"


@nox.session
def style(session: nox.Session) -> None:
    session.install(Requirements.RUFF)
    # Replaces `black --check`
    session.run("ruff", "format", "--check", *SOURCES)
    # Replaces `isort --check-only`
    session.run("ruff", "check", "--select", "I", *SOURCES)


@nox.session
def lints(session: nox.Session) -> None:
    session.install(Requirements.RUFF)
    session.run("ruff", "check", *SOURCES)


@nox.session()
def typing(session: nox.Session) -> None:
    session.install(
        ".",
        Requirements.NOX,
        Requirements.PYRIGHT,
        Requirements.PYTEST,
    )

    session.run("basedpyright", *SOURCES)


@nox.session()
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")

    session.run(
        "python3",
        # Run tests in development mode (enables extra checks)
        "-X",
        "dev",
        # Treat warnings (deprections, etc.) as errors
        "-Werror",
        "-m",
        "pytest",
        "tests",
        "-vv",
        "--cov-branch",
        "--cov",
        "tests",
        "--cov",
        "src",
        "--cov-report=term-missing",
        "--no-cov-on-fail",
    )

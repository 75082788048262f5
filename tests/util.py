from avgstars.cli import main


def run_cli(capsys, *argv: str) -> tuple[int, str, str]:
    """
    Run the CLI in-process and return (exit code, stdout, stderr).
    """
    code = main(list(argv))
    out = capsys.readouterr()
    return code, out.out, out.err

import logging
import sys

import click

from intcalc.evaluator import EvalError, evaluate
from intcalc.tokenizer import LexError, tokenize
from intcalc.utils import CalcError, point_at

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


def render_error(code: str, error: CalcError) -> str:
    if isinstance(error, EvalError) and error.position is not None:
        return "\n".join([str(error), point_at(code, error.position)])
    return str(error)


def run_line(code: str) -> int:
    tokens = tokenize(code)
    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    result = evaluate(tokens)
    logger.debug("Result of %r: %d", code, result)
    return result


def repl() -> None:
    logger.info("Starting interactive session")
    while True:
        try:
            code = input("> ")
        except EOFError:
            break
        if code.strip() in EXIT_COMMANDS:
            break

        try:
            result = run_line(code)
        except (LexError, EvalError) as e:
            click.echo(render_error(code, e))
            continue

        click.echo(result)
    logger.info("Interactive session finished")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1)
@click.option("-v", "--verbose", is_flag=True, help="Log tokens and results of every expression.")
def main(expression: tuple[str, ...], verbose: bool) -> None:
    """Evaluate integer arithmetic EXPRESSION, or start an interactive session if none is given.

    Words of EXPRESSION are joined with spaces, so `intcalc 2 + 3` works. An expression starting
    with "-" may also be passed after "--".
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("intcalc").setLevel(level)
    if not expression:
        repl()
        return

    code = " ".join(expression)
    try:
        result = run_line(code)
    except (LexError, EvalError) as e:
        click.echo(render_error(code, e), err=True)
        sys.exit(1)
    click.echo(result)


if __name__ == "__main__":
    main()

from mdb_publish.core.errors import ConfirmationDeclined
from mdb_publish.gateway.console.abc import Console


def confirm_or_abort(console: Console, prompt: str, *, consequence: str) -> None:
    """Ask a yes/no question and abort the release unless the answer is yes.

    Args:
        console: Where to ask
        prompt: The question
        consequence: What declining means, used in the abort message
            (e.g., "existing release left untouched")

    Raises:
        ConfirmationDeclined: If the operator does not answer 'y' or 'Y'
    """
    if not console.confirm(prompt):
        raise ConfirmationDeclined(consequence)

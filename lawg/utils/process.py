import sys
from typing import NoReturn, Optional, TextIO


def terminate(status: int = 1, stream: Optional[TextIO] = None) -> NoReturn:
    """
    End the process with *status*.

    *stream* (if given) and the standard streams are flushed first so the last
    emitted line is not lost. Raises ``SystemExit``, so ``finally`` blocks and
    ``atexit`` hooks still run.
    """
    if stream is not None:
        stream.flush()
    sys.stdout.flush()
    sys.stderr.flush()
    sys.exit(status)

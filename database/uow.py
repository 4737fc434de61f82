import contextlib
import logging

from database.database import db_session_scope
from database.repository import HiringRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def hiring_uow():
    """Per-unit-of-work transaction scope.

    Yields a HiringRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with hiring_uow() as repo:
            matches = find_matches(ctx, repo, job_id)
            persist_matches(repo, job_id, matches)
        # commit happens automatically on successful exit
    """
    with db_session_scope() as session:
        yield HiringRepository(session)

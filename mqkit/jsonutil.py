"""Fetching a value as text and decoding it as JSON."""

import json
import logging
from typing import Any, Callable

_log = logging.getLogger(__name__)


def getter(call: Callable[[], str]) -> Any:
    """Call ``call`` and decode the text it returns as JSON.

    Exceptions raised by ``call`` propagate; invalid JSON raises ``ValueError``.
    """
    text = call()
    _log.debug("Etcd--> %s", text)
    return json.loads(text)
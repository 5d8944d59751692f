"""Base scanner - Runs independently guarded probes into one group."""

import logging
from collections.abc import Callable, Iterable

from server_info.model.report import Fact, Group

logger = logging.getLogger(__name__)

Probe = Callable[[dict[str, Fact]], None]


class BaseScanner:
    """Collects the facts of one report group.

    Each probe adds zero or more facts to the field mapping. A probe that
    raises is logged and skipped; the probes after it still run.
    """

    group_key: str = ""

    def group_label(self) -> str:
        raise NotImplementedError

    def probes(self) -> Iterable[Probe]:
        raise NotImplementedError

    def scan(self) -> Group:
        fields: dict[str, Fact] = {}
        for probe in self.probes():
            self._run_probe(probe, fields)
        return Group(key=self.group_key, label=self.group_label(), fields=fields)

    def _run_probe(self, probe: Probe, fields: dict[str, Fact]) -> None:
        try:
            probe(fields)
        except Exception as e:
            name = getattr(probe, "__name__", repr(probe))
            logger.warning("Probe %s in %s failed: %s", name, self.__class__.__name__, e)

"""Expand/collapse state of the detail panel under the picture."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

_LOG = logging.getLogger(__name__)


@dataclass
class DetailPanel:
    """Local UI state. Survives Streamlit reruns only through snapshot()/restore()."""

    expanded: bool = False

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        _LOG.debug("Detail panel %s", "expanded" if self.expanded else "collapsed")
        return self.expanded

    def snapshot(self) -> dict[str, bool]:
        return {"expanded": self.expanded}

    @classmethod
    def restore(cls, snapshot: Mapping[str, object] | None) -> "DetailPanel":
        """Rebuild a panel from snapshot(). A missing snapshot gives the default."""
        if not snapshot:
            return cls()
        return cls(expanded=bool(snapshot.get("expanded", False)))

# src/netinf/config.py

"""Runtime configuration for the influence analysis script."""

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from netinf.selection.greedy import STRATEGIES

GRAPH_FORMATS = ("edge_list", "gpickle")


@dataclass
class AnalysisConfig:
    """
    Settings for one analysis run.

    Attributes:
        graph_path: input graph file.
        k: number of vertices each strategy selects.
        strategies: which selectors to run, any of "degree", "modular",
            "submodular".
        fmt: input format of graph_path.
        log_level: name of a `logging` level.
        export_path: if set, the loaded graph is also written here as a
            networkx gpickle.
    """

    graph_path: Path
    k: int = 10
    strategies: List[str] = field(default_factory=lambda: list(STRATEGIES))
    fmt: str = "edge_list"
    log_level: str = "INFO"
    export_path: Optional[Path] = None

    def validate(self) -> "AnalysisConfig":
        unknown = [s for s in self.strategies if s not in STRATEGIES]
        if unknown:
            raise ValueError(f"Unknown strategies: {unknown}")
        if self.fmt not in GRAPH_FORMATS:
            raise ValueError(f"Unsupported graph format: {self.fmt}")
        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "AnalysisConfig":
        return cls(
            graph_path=Path(args.graph),
            k=args.k,
            strategies=list(args.strategies),
            fmt=args.fmt,
            log_level=args.log_level,
            export_path=Path(args.export) if args.export else None,
        ).validate()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

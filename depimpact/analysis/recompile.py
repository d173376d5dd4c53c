"""Recompile map: which roots recompile when a unit changes.

Runs the compile-impact resolver once per root and inverts the per-root sets
into ``unit -> [roots that must recompile when unit changes]``. Roots are
independent read-only computations, so they may run on a thread pool.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from depimpact.config.schema import AnalysisConfig
from depimpact.graph.models.schema import DependencyKind, UnitId
from depimpact.graph.ops import find_compile_impact, find_typed_closure, iter_units
from depimpact.graph.ops.traversal import GraphLike, as_adjacency

logger = logging.getLogger("depimpact.analysis.recompile")

ResultT = TypeVar("ResultT")


class RecompileAnalyzer:
    """Analyzer building inverted compile-impact maps for a batch of roots.

    The graph is converted once and shared read-only by every worker.
    """

    def __init__(self, graph: GraphLike, config: Optional[AnalysisConfig] = None) -> None:
        """Initialize recompile analyzer.

        Args:
            graph: Adjacency mapping or networkx graph.
            config: Batch analysis configuration (defaults apply when None).
        """
        self.graph = as_adjacency(graph)
        self.config = config or AnalysisConfig()
        logger.info(
            "RecompileAnalyzer initialized (max_workers=%d)", self.config.max_workers
        )

    def _select_roots(self, roots: Optional[Iterable[UnitId]]) -> List[UnitId]:
        if roots is None:
            return list(iter_units(self.graph))
        # Duplicate roots would otherwise be listed twice per affected unit.
        return list(dict.fromkeys(roots))

    def _map_roots(
        self,
        resolver: Callable[..., ResultT],
        roots: List[UnitId],
    ) -> Iterator[Tuple[UnitId, ResultT]]:
        """Yield ``(root, resolver(graph, root))`` as results complete."""
        max_workers = min(self.config.max_workers, len(roots))
        if max_workers <= 1:
            for root in roots:
                yield root, resolver(self.graph, root)
            return

        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="Recompile"
        ) as executor:
            futures = {executor.submit(resolver, self.graph, root): root for root in roots}
            try:
                for future in as_completed(futures):
                    yield futures[future], future.result()
            except BaseException:
                # A failing root aborts the batch; drop work not yet started.
                for future in futures:
                    future.cancel()
                raise

    def iter_impacts(
        self, roots: Optional[Iterable[UnitId]] = None
    ) -> Iterator[Tuple[UnitId, Set[UnitId]]]:
        """Stream ``(root, compile impact set)`` pairs in completion order.

        Args:
            roots: Roots to resolve; every unit of the graph when None.
        """
        yield from self._map_roots(find_compile_impact, self._select_roots(roots))

    def analyze(self, roots: Optional[Iterable[UnitId]] = None) -> Dict[UnitId, List[UnitId]]:
        """Build the recompile map.

        Args:
            roots: Roots to resolve; every unit of the graph when None.

        Returns:
            Dict[UnitId, List[UnitId]]: Affected unit -> roots it forces to
            recompile, roots listed in input order. Every root lists itself.

        Raises:
            UnrecognizedEdgeTypeError: Any root hit an unknown edge type.
        """
        selected = self._select_roots(roots)
        logger.info("Building recompile map for %d root(s)", len(selected))

        impacts = dict(self._map_roots(find_compile_impact, selected))

        recompile_map: Dict[UnitId, List[UnitId]] = {}
        for root in selected:
            for unit_id in impacts[root]:
                recompile_map.setdefault(unit_id, []).append(root)

        logger.info("Recompile map covers %d unit(s)", len(recompile_map))
        return recompile_map

    def analyze_kinds(
        self, roots: Optional[Iterable[UnitId]] = None
    ) -> Dict[UnitId, Dict[UnitId, DependencyKind]]:
        """Build the dependents map annotated with dependency kind.

        Unlike :meth:`analyze`, this distinguishes roots that depend on a unit
        through compile, export or runtime relationships.

        Returns:
            Dict[UnitId, Dict[UnitId, DependencyKind]]: Unit -> {root: kind}.
        """
        selected = self._select_roots(roots)
        logger.info("Building typed dependents map for %d root(s)", len(selected))

        closures = dict(self._map_roots(find_typed_closure, selected))

        dependents: Dict[UnitId, Dict[UnitId, DependencyKind]] = {}
        for root in selected:
            for unit_id, kind in closures[root].items():
                dependents.setdefault(unit_id, {})[root] = kind

        logger.info("Typed dependents map covers %d unit(s)", len(dependents))
        return dependents

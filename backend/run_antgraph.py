import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from antgraph.graph.graph_store import GraphStore  # noqa: E402
from antgraph.formats.edges_binary import write_edges  # noqa: E402
from antgraph.formats.grid import save_vertices  # noqa: E402
from antgraph.formats.report import visit_lines  # noqa: E402

from backend.app.config import AppConfig  # noqa: E402
from backend.app.loaders.graph_loader import load_graph_from_files  # noqa: E402
from backend.app.services.antenna_service import AntennaService  # noqa: E402


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("antgraph.run")
    config = AppConfig().antgraph
    storage = config.storage

    graph = GraphStore()
    loaded = load_graph_from_files(
        graph=graph,
        grid_path=Path(storage.grid_path),
        empty_label=config.graph.empty_label,
    )
    if not loaded:
        logger.error("could not read antenna grid %s", storage.grid_path)
        graph.clear()
        return 1

    service = AntennaService(graph=graph, config=config)
    service.grow(edges_path=storage.edges_path if storage.restore_edges else None)

    write_edges(graph, storage.edges_path)

    adjacency = service.adjacency()
    for line in adjacency:
        logger.info(line)
    logger.info("%s antennas listed", len(adjacency))

    matrix = service.matrix()
    if matrix is None:
        logger.warning("grid too large to render; skipping matrix")
    else:
        logger.info("\n%s", matrix)

    for strategy in ("breadth_first", "depth_first"):
        result = service.traverse(strategy=strategy)
        if result is None:
            logger.warning(
                "[%s] start (%s, %s) is not an antenna",
                strategy,
                config.traversal.start_x,
                config.traversal.start_y,
            )
            continue
        for line in visit_lines(service.query):
            logger.info("[%s] %s", strategy, line)

    if save_vertices(graph, storage.result_path):
        logger.info("vertex list saved to %s", storage.result_path)

    graph.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())

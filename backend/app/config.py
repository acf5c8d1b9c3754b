from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from antgraph.config.settings import (
    GraphConfig,
    TraversalConfig,
    StorageConfig,
    AntgraphConfig,
)

settings = Dynaconf(
    envvar_prefix="ANTGRAPH",
    load_dotenv=True,
    settings_files=[],
)
settings.update(DEFAULTS)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "antgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "")

    # ---------------- Antgraph Policy ----------------
    antgraph: AntgraphConfig = AntgraphConfig(
        graph=GraphConfig(
            marker_label=settings.get("MARKER_LABEL", "#"),
            empty_label=settings.get("EMPTY_LABEL", "."),
            deduce_antinodes=settings.get("DEDUCE_ANTINODES", True),
            link_same_frequency=settings.get("LINK_SAME_FREQUENCY", True),
        ),
        traversal=TraversalConfig(
            strategy=settings.get("TRAVERSAL_STRATEGY", "breadth_first"),
            start_x=settings.get("START_X", 0),
            start_y=settings.get("START_Y", 0),
        ),
        storage=StorageConfig(
            grid_path=settings.get("GRID_PATH", "data/antennas.txt"),
            edges_path=settings.get("EDGES_PATH", "data/edges.bin"),
            result_path=settings.get("RESULT_PATH", "data/result.txt"),
            restore_edges=settings.get("RESTORE_EDGES", False),
            bidirectional_restore=settings.get("BIDIRECTIONAL_RESTORE", True),
        ),
    )

"""Project tree materialization from IS_CHILD_OF links.

The link graph carries no parent pointer: the children of a node are
found with one query per node. Traversal is iterative and refuses to
visit a node twice, so a malformed (cyclic) graph fails fast instead of
recursing forever.
"""

from src.wtt.core.exceptions import InternalError
from src.wtt.core.logging import get_logger
from src.wtt.mappers import map_to_project
from src.wtt.models import Activity
from src.wtt.repositories import ActivityRepository
from src.wtt.schemas import Project

logger = get_logger(__name__)


async def build_project_tree(
    activities: ActivityRepository,
    root: Activity,
    max_depth: int,
) -> Project:
    """Map `root` to a Project with all active descendants nested in it.

    Siblings keep the repository's name ordering.

    Raises:
        InternalError: If a node is reached twice or the tree is deeper
            than `max_depth`
    """
    root_node = map_to_project(root)
    visited = {root.id}
    stack: list[tuple[str, Project, int]] = [(root.id, root_node, 0)]

    while stack:
        activity_id, node, depth = stack.pop()
        children = await activities.list_children(activity_id)
        if children and depth >= max_depth:
            raise InternalError(
                f"project tree below <{root.id}> exceeds the maximum depth of {max_depth}",
                details={"project_id": root.id, "max_depth": max_depth},
            )
        for child in children:
            if child.id in visited:
                logger.error("Cycle in project links", project_id=root.id, revisited=child.id)
                raise InternalError(
                    f"project links below <{root.id}> form a cycle at <{child.id}>",
                    details={"project_id": root.id, "revisited": child.id},
                )
            visited.add(child.id)
            child_node = map_to_project(child)
            node.projects.append(child_node)
            stack.append((child.id, child_node, depth + 1))

    return root_node


async def collect_descendant_ids(
    activities: ActivityRepository,
    root_ids: list[str],
) -> list[str]:
    """Collect ids of all active descendants of the given roots.

    Nodes reached more than once are listed once; order is not significant.
    """
    seen = set(root_ids)
    descendants: list[str] = []
    stack = list(reversed(root_ids))

    while stack:
        activity_id = stack.pop()
        children = await activities.list_children(activity_id)
        for child in reversed(children):
            if child.id in seen:
                continue
            seen.add(child.id)
            descendants.append(child.id)
            stack.append(child.id)

    return descendants

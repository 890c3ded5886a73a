"""
Example: AVL insert/delete traces

Usage:
    python examples/avl_steps.py
"""

import logging

import avlstep as av
from avlstep.tracing import TraceRecorder

logger = logging.getLogger("avl_steps")


def replay(session: av.Session, title: str) -> None:
    logger.info("== %s", title)
    while session.player.advance() is not None:
        logger.info(
            "  %2d/%d  %s",
            session.player.current_step,
            session.player.total_steps,
            session.player.message,
        )
        logger.info("\n%s", av.render_tree_text(session.tree.root, session.player.highlight_key))
    stats = session.stats()
    logger.info("  height=%d rotations=%d", stats.height, stats.rotations)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    session = av.Session()
    for key in [30, 20, 10, 25, 28]:
        session.insert(key)
        replay(session, f"Insert {key}")

    session.delete(20)
    replay(session, "Delete 20")

    rec = TraceRecorder()
    for event in session.tree.insert(28):
        rec.record(event)
    rec.dump()

import sys

from quadcache.log import log
from quadcache.viewer import QuadtreeViewer


if __name__ == "__main__":
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 0

    log("Loading viewer")
    viewer = QuadtreeViewer(seed)

    log("Running viewer")
    viewer.run()

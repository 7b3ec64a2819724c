# put the repository home directory on sys.path so the tools can import
# the sibling pairheap package without installing it
from pathlib import Path
import sys

repo_home_dir = str(Path(__file__).parent.parent.absolute())
if repo_home_dir not in sys.path:
    sys.path.append(repo_home_dir)

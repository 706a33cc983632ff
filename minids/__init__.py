from minids.hashset import HashSet
from minids.intlist import IntList
from minids.stringhash import myhash
from minids.treeset import RandomizedSet

__all__ = ["HashSet", "IntList", "RandomizedSet", "myhash"]
__version__ = "0.1.0"

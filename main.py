import os
import sys
import time
import random
import string

from minids import HashSet, IntList, RandomizedSet
from minids.stringhash import HASH_INFO

NUM_VALUES = int(os.environ.get("MINIDS_SMOKE_SIZE", "10000"))


def random_words(count: int, rng: random.Random):
    seen = set()
    while len(seen) < count:
        seen.add("".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10))))
    return sorted(seen)


def run_treeset_smoke_test():
    print("--- RandomizedSet: sorted insertion ---")
    start_time = time.time()
    with RandomizedSet() as tree:
        for v in range(NUM_VALUES):
            tree.insert(v)
        end_time = time.time()

        print(f"Inserted {len(tree):,} values in {end_time - start_time:.2f}s")
        tree.show_statistics(sys.stdout)

        missing = [v for v in range(NUM_VALUES) if not tree.exists(v)]
        print(f"Missing after insertion: {len(missing)}")
        print(f"exists({NUM_VALUES}) -> {tree.exists(NUM_VALUES)}")

    small = RandomizedSet(seed=0)
    for v in [5, 1, 9, 3, 7]:
        small.insert(v)
    print("Small tree: ", end="")
    small.print(sys.stdout)
    print()


def run_hashset_smoke_test():
    print("--- HashSet: hash function comparison ---")
    words = random_words(NUM_VALUES, random.Random(0))
    for name, func in HASH_INFO:
        table = HashSet(hash_function=func)
        start_time = time.time()
        for w in words:
            table.insert(w)
        end_time = time.time()
        print(f"{name:>12}: {end_time - start_time:.2f}s, ", end="")
        table.show_statistics(sys.stdout)


def run_intlist_smoke_test():
    print("--- IntList ---")
    numbers = IntList()
    for v in range(5):
        numbers.push_back(v)
    numbers.push_front(-1)
    numbers.insert_after(numbers.first(), 100)
    print(f"Contents: {list(numbers)}")
    print(f"pop_front -> {numbers.pop_front()}, size now {len(numbers)}")


if __name__ == "__main__":
    run_treeset_smoke_test()
    run_hashset_smoke_test()
    run_intlist_smoke_test()

# Run a full invariant check after every successful insertion. This walks the
# whole tree, so an insert becomes O(n log n). Only useful while debugging a
# change to the rebalancing code.
VALIDATE_ON_INSERT = False

# How many keys `repr(tree)` shows before eliding the rest. Large trees are
# otherwise unreadable in a traceback or a debugger.
REPR_MAX_KEYS = 20

# The JSON lines file written by generate_example_dataset.py and read back by
# simple_bench.py.
BENCH_DATASET = "example_keys.jl"

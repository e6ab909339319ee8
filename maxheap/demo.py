"""
Command line demo: push the given integers into a max heap, show the internal
order, then pop everything.

    python -m maxheap.demo 1 2 5 4 3
"""
import argparse

from maxheap.config import HeapConfig
from maxheap.heap import Heap
from maxheap.utils import Logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("values", type=int, nargs="*", help="integers to push")
    parser.add_argument(
        "--log_level", default=HeapConfig.LOG_LEVEL, type=str, help="log level"
    )
    parser.add_argument(
        "--check_integrity",
        action="store_true",
        default=False,
        help="verify the heap property after every operation",
    )
    return parser.parse_args(argv)


def make_config(args):
    config = HeapConfig()
    config.CHECK_INTEGRITY = args.check_integrity
    config.LOG_LEVEL = args.log_level
    return config


def run(config, values, out=print):
    heap = Heap(config)
    for value in values:
        heap.push(value)
        Logger.debug("pushed %s, heap is %s", value, heap)

    out("heap: {}".format(list(heap.heap())))
    out("peek: {}".format(heap.peek()))

    popped = []
    while not heap.is_empty():
        popped.append(heap.pop())
    out("pop order: {}".format(popped))
    return popped


def main(argv=None):
    args = parse_args(argv)
    config = make_config(args)
    Logger.set_logging_level(config.LOG_LEVEL)
    run(config, args.values)


if __name__ == "__main__":
    main()

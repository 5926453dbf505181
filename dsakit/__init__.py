"""Classic data structures and algorithms: arrays, searching, sorting, stacks,
postfix evaluation, bracket matching, queues and binary trees."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "brackets",
    "postfix",
    "queues",
    "searching",
    "sorting",
    "stack",
    "tree",
]
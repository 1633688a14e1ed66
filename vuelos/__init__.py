"""Line-command flight board and the stack, queue, list, heap, hash map and search tree it uses."""

__version__ = "0.1.0"
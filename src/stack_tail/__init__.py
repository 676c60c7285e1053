"""Tail the state of AWS CloudFormation stacks in the terminal."""

__version__ = "0.1.0"

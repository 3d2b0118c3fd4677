"""Builtin functions and the method dispatch for G values."""
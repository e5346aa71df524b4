# src/larklang/evaluator/functions.py
import click

from ..environment import Environment
from ..object import (
    Integer, Array, Builtin, Function, ReturnValue,
    STRING_OBJ, ARRAY_OBJ,
)
from .utils import is_error, new_error, debug_log, NULL


def _wrong_arg_count(got, want):
    return new_error("wrong number of arguments. got=%d, want=%d", got, want)


class FunctionEvaluatorMixin:
    """Handles function application and defines the builtin registry."""

    def __init__(self):
        self.builtins = {}
        self._register_core_builtins()

    def eval_call_expression(self, node, env):
        debug_log("CallExpression node", f"Calling {node.function}")

        fn = self.eval_node(node.function, env)
        if is_error(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_error(args):
            return args

        debug_log("  Arguments evaluated", f"count: {len(args)}")
        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        if isinstance(fn, Function):
            if len(fn.parameters) != len(args):
                return new_error(
                    "Argument mismatch, function %s expected %d parameter(s), but got %d",
                    fn.type(), len(fn.parameters), len(args),
                )

            new_env = self.extend_function_env(fn, args)
            res = self.eval_node(fn.body, new_env)
            return self.unwrap_return_value(res)

        if isinstance(fn, Builtin):
            debug_log("  Calling builtin", fn.name)
            return fn.fn(*args)

        return new_error("not a function: %s", fn.type())

    def extend_function_env(self, fn, args):
        new_env = Environment.new_enclosed(fn.env)
        for param, arg in zip(fn.parameters, args):
            new_env.set(param.value, arg)
        return new_env

    def unwrap_return_value(self, obj):
        if isinstance(obj, ReturnValue):
            return obj.value
        return NULL if obj is None else obj

    # === BUILTINS ===

    def _register_core_builtins(self):
        def _len(*a):
            if len(a) != 1:
                return _wrong_arg_count(len(a), 1)
            arg = a[0]
            if arg.type() == STRING_OBJ:
                return Integer(len(arg.value))
            if arg.type() == ARRAY_OBJ:
                return Integer(len(arg.elements))
            return new_error("argument to `len` not supported, got %s", arg.type())

        def _first(*a):
            if len(a) != 1:
                return _wrong_arg_count(len(a), 1)
            if a[0].type() != ARRAY_OBJ:
                return new_error("argument to `first` must be ARRAY, got %s", a[0].type())
            return a[0].elements[0] if a[0].elements else NULL

        def _last(*a):
            if len(a) != 1:
                return _wrong_arg_count(len(a), 1)
            if a[0].type() != ARRAY_OBJ:
                return new_error("argument to `last` must be ARRAY, got %s", a[0].type())
            return a[0].elements[-1] if a[0].elements else NULL

        def _rest(*a):
            if len(a) != 1:
                return _wrong_arg_count(len(a), 1)
            if a[0].type() != ARRAY_OBJ:
                return new_error("argument to `rest` must be ARRAY, got %s", a[0].type())
            return Array(a[0].elements[1:]) if a[0].elements else NULL

        def _push(*a):
            if len(a) != 2:
                return _wrong_arg_count(len(a), 2)
            if a[0].type() != ARRAY_OBJ:
                return new_error("argument to `push` must be ARRAY, got %s", a[0].type())
            return Array(a[0].elements + [a[1]])

        def _puts(*a):
            for arg in a:
                click.echo(arg.inspect())
            return NULL

        self.builtins.update({
            "len": Builtin(_len, "len"),
            "first": Builtin(_first, "first"),
            "last": Builtin(_last, "last"),
            "rest": Builtin(_rest, "rest"),
            "push": Builtin(_push, "push"),
            "puts": Builtin(_puts, "puts"),
        })

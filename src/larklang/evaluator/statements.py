# src/larklang/evaluator/statements.py
from ..object import ReturnValue, RETURN_VALUE_OBJ, ERROR_OBJ
from .utils import is_error, debug_log, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statement sequences, bindings and returns."""

    def eval_program(self, program, env):
        debug_log("eval_program", f"Processing {len(program.statements)} statements")

        result = None
        for i, stmt in enumerate(program.statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__)
            result = self.eval_node(stmt, env)

            if isinstance(result, ReturnValue):
                debug_log("  ReturnValue encountered", result.value)
                return result.value
            if is_error(result):
                debug_log("  Error encountered", result.message)
                return result

        return result

    def eval_block_statement(self, block, env):
        debug_log("eval_block_statement", f"len={len(block.statements)}")

        result = None
        for stmt in block.statements:
            result = self.eval_node(stmt, env)

            # Return values stay wrapped until the enclosing call unwraps them
            if result is not None and result.type() in (RETURN_VALUE_OBJ, ERROR_OBJ):
                debug_log("  Block interrupted", result.type())
                return result

        return NULL if result is None else result

    def eval_let_statement(self, node, env):
        debug_log("eval_let_statement", f"let {node.name.value}")

        value = self.eval_node(node.value, env)
        if is_error(value):
            return value

        env.set(node.name.value, NULL if value is None else value)
        return None

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if is_error(val):
            return val
        return ReturnValue(val)

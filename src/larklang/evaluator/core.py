# src/larklang/evaluator/core.py
from .. import lark_ast
from ..object import Integer, String
from .utils import debug_log, new_error, native_bool_to_boolean
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self):
        # FunctionEvaluatorMixin sets up builtins
        FunctionEvaluatorMixin.__init__(self)

    def eval_node(self, node, env):
        node_type = type(node)
        debug_log("eval_node", f"Processing {node_type.__name__}")

        # === STATEMENTS ===
        if node_type == lark_ast.Program:
            return self.eval_program(node, env)

        elif node_type == lark_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == lark_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == lark_ast.LetStatement:
            return self.eval_let_statement(node, env)

        elif node_type == lark_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == lark_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == lark_ast.IntegerLiteral:
            return Integer(node.value)

        elif node_type == lark_ast.StringLiteral:
            return String(node.value)

        elif node_type == lark_ast.Boolean:
            return native_bool_to_boolean(node.value)

        elif node_type == lark_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == lark_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == lark_ast.IfExpression:
            return self.eval_if_expression(node, env)

        elif node_type == lark_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        elif node_type == lark_ast.CallExpression:
            return self.eval_call_expression(node, env)

        elif node_type == lark_ast.ArrayLiteral:
            return self.eval_array_literal(node, env)

        elif node_type == lark_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        elif node_type == lark_ast.HashLiteral:
            return self.eval_hash_literal(node, env)

        # Only reachable with a hand-built tree the parser would never produce
        return new_error("unknown node type: %s", node_type.__name__)


# Global Entry Point
def evaluate(program, env, evaluator=None):
    """Evaluate ``program`` in ``env`` and return the resulting Object (or None)."""
    evaluator = evaluator or Evaluator()
    return evaluator.eval_node(program, env)

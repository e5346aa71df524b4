# src/larklang/evaluator/expressions.py
from ..object import (
    Integer, String, Array, Hash, HashPair, Hashable, Function,
    INTEGER_OBJ, BOOLEAN_OBJ, STRING_OBJ, ARRAY_OBJ, HASH_OBJ,
)
from .utils import is_error, new_error, debug_log, is_truthy, native_bool_to_boolean, NULL


def _truncating_div(left_val, right_val):
    # Python's // floors; the language truncates toward zero
    quotient = abs(left_val) // abs(right_val)
    return quotient if (left_val >= 0) == (right_val > 0) else -quotient


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: literals, operators, identifiers, collections."""

    def eval_identifier(self, node, env):
        debug_log("eval_identifier", f"Looking up: {node.value}")

        val, found = env.lookup(node.value)
        if found:
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            debug_log("  Found builtin", node.value)
            return builtin

        return new_error("identifier not found: %s", node.value)

    def eval_expressions(self, expressions, env):
        """Evaluate left to right; returns a list or the first Error met."""
        results = []
        for expr in expressions:
            res = self.eval_node(expr, env)
            if is_error(res):
                return res
            results.append(res)
        return results

    # === PREFIX ===

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        if node.operator == "!":
            return self.eval_bang_operator(right)
        elif node.operator == "-":
            return self.eval_minus_operator(right)
        return new_error("unknown operator: %s%s", node.operator, right.type())

    def eval_bang_operator(self, right):
        # Numeric truthiness here: only 0 is falsy
        if right.type() == BOOLEAN_OBJ:
            return native_bool_to_boolean(not right.value)
        if right.type() == INTEGER_OBJ:
            return native_bool_to_boolean(right.value == 0)
        return new_error("undefined behavior with ! operator and %s", right.type())

    def eval_minus_operator(self, right):
        if right.type() != INTEGER_OBJ:
            return new_error("unknown operator: -%s", right.type())
        return Integer(-right.value)

    # === INFIX ===

    def eval_infix_expression(self, node, env):
        debug_log("eval_infix_expression", node)

        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        return self.apply_infix_operator(node.operator, left, right)

    def apply_infix_operator(self, operator, left, right):
        if left.type() == INTEGER_OBJ and right.type() == INTEGER_OBJ:
            return self.eval_integer_infix(operator, left, right)
        elif left.type() == STRING_OBJ and right.type() == STRING_OBJ:
            return self.eval_string_infix(operator, left, right)
        # Everything else compares by identity
        elif operator == "==":
            return native_bool_to_boolean(left is right)
        elif operator == "!=":
            return native_bool_to_boolean(left is not right)
        elif left.type() != right.type():
            return new_error("type mismatch: %s %s %s", left.type(), operator, right.type())
        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(left_val + right_val)
        elif operator == "-":
            return Integer(left_val - right_val)
        elif operator == "*":
            return Integer(left_val * right_val)
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero: %s / %s", left.type(), right.type())
            return Integer(_truncating_div(left_val, right_val))
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean(left_val != right_val)

        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        elif operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    # === CONDITIONALS & FUNCTIONS ===

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if is_error(condition):
            return condition

        if is_truthy(condition):
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NULL

    def eval_function_literal(self, node, env):
        return Function(node.parameters, node.body, env)

    # === COLLECTIONS ===

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_error(elements):
            return elements
        return Array(elements)

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        index = self.eval_node(node.index, env)
        if is_error(index):
            return index

        if left.type() == ARRAY_OBJ and index.type() == INTEGER_OBJ:
            return self.eval_array_index(left, index)
        elif left.type() == HASH_OBJ:
            return self.eval_hash_index(left, index)
        return new_error("index operator not supported: %s", left.type())

    def eval_array_index(self, array, index):
        idx = index.value
        if idx < 0 or idx > len(array.elements) - 1:
            return NULL
        return array.elements[idx]

    def eval_hash_index(self, hash_obj, index):
        if not isinstance(index, Hashable):
            return new_error("unusable as hash key: %s", index.type())

        value = hash_obj.get(index)
        return NULL if value is None else value

    def eval_hash_literal(self, node, env):
        pairs = {}

        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_error(key):
                return key

            if not isinstance(key, Hashable):
                return new_error("unusable as hash key: %s", key.type())

            value = self.eval_node(value_node, env)
            if is_error(value):
                return value

            pairs[key.hash_key()] = HashPair(key, value)

        return Hash(pairs)

# src/larklang/lark_ast.py

# Base classes
class Node:
    def __repr__(self):
        return f"{self.__class__.__name__}()"

class Statement(Node): pass
class Expression(Node): pass

class Program(Node):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"

    def __str__(self):
        return "".join(str(s) for s in self.statements)

# Statement Nodes
class LetStatement(Statement):
    def __init__(self, name, value):
        self.name = name; self.value = value

    def __repr__(self):
        return f"LetStatement(name={self.name!r}, value={self.value!r})"

    def __str__(self):
        return f"let {self.name} = {self.value};"

class ReturnStatement(Statement):
    def __init__(self, return_value):
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value!r})"

    def __str__(self):
        return f"return {self.return_value};"

class ExpressionStatement(Statement):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression!r})"

    def __str__(self):
        return str(self.expression) if self.expression is not None else ""

class BlockStatement(Statement):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"BlockStatement(statements={len(self.statements)})"

    def __str__(self):
        return "".join(str(s) for s in self.statements)

# Expression Nodes
class Identifier(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Identifier('{self.value}')"

    def __str__(self):
        return self.value

class IntegerLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"IntegerLiteral({self.value})"

    def __str__(self):
        return str(self.value)

class StringLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"StringLiteral('{self.value}')"

    def __str__(self):
        return self.value

class Boolean(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Boolean({self.value})"

    def __str__(self):
        return "true" if self.value else "false"

class PrefixExpression(Expression):
    def __init__(self, operator, right):
        self.operator = operator; self.right = right

    def __repr__(self):
        return f"PrefixExpression(operator='{self.operator}', right={self.right!r})"

    def __str__(self):
        return f"({self.operator}{self.right})"

class InfixExpression(Expression):
    def __init__(self, left, operator, right):
        self.left = left; self.operator = operator; self.right = right

    def __repr__(self):
        return f"InfixExpression(left={self.left!r}, operator='{self.operator}', right={self.right!r})"

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"

class IfExpression(Expression):
    def __init__(self, condition, consequence, alternative=None):
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __repr__(self):
        return f"IfExpression(condition={self.condition!r}, has_alternative={self.alternative is not None})"

    def __str__(self):
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out

class FunctionLiteral(Expression):
    def __init__(self, parameters, body):
        self.parameters = parameters
        self.body = body

    def __repr__(self):
        params = ", ".join(p.value for p in self.parameters)
        return f"FunctionLiteral(parameters=[{params}])"

    def __str__(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {self.body}"

class CallExpression(Expression):
    def __init__(self, function, arguments):
        self.function = function
        self.arguments = arguments

    def __repr__(self):
        return f"CallExpression(function={self.function!r}, arguments={len(self.arguments)})"

    def __str__(self):
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"

class ArrayLiteral(Expression):
    def __init__(self, elements):
        self.elements = elements

    def __repr__(self):
        return f"ArrayLiteral(elements={len(self.elements)})"

    def __str__(self):
        return "[" + ", ".join(str(e) for e in self.elements) + "]"

class IndexExpression(Expression):
    def __init__(self, left, index):
        self.left = left
        self.index = index

    def __repr__(self):
        return f"IndexExpression(left={self.left!r}, index={self.index!r})"

    def __str__(self):
        return f"({self.left}[{self.index}])"

class HashLiteral(Expression):
    def __init__(self, pairs):
        self.pairs = pairs  # list of (key, value) expression pairs

    def __repr__(self):
        return f"HashLiteral(pairs={len(self.pairs)})"

    def __str__(self):
        pairs = ", ".join(f"{k}:{v}" for k, v in self.pairs)
        return "{" + pairs + "}"

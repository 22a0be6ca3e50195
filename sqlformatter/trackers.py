"""
=================================
Nesting trackers for DML layout.
=================================

Small counters and stacks that carry the state the layout engine needs when
subqueries and function calls nest inside each other.

Classes:
    ParenthesisTracker: Open-parenthesis count per SELECT level
    FunctionTracker: Depth of function-call argument lists
    FieldTracker: Whether top-level commas start new lines
    ClauseTracker: Clause-level flags (open qualifier, open ON condition, BETWEEN)

Each SELECT pushes the parenthesis count, the field flag and the clause flags,
and the closing parenthesis of that SELECT's subquery pops them again.
"""

from typing import List


class ParenthesisTracker:
    """Open-parenthesis counter with a saved-state stack.

    Attributes:
        count: Parentheses opened since the innermost SELECT
    """

    def __init__(self):
        self._stack: List[int] = []
        self.count = 0

    def increment(self) -> "ParenthesisTracker":
        self.count += 1
        return self

    def decrement(self) -> "ParenthesisTracker":
        self.count -= 1
        return self

    def push(self) -> "ParenthesisTracker":
        """Save the current count and start counting from zero."""
        self._stack.append(self.count)
        self.count = 0
        return self

    def pop(self) -> "ParenthesisTracker":
        """Restore the most recently saved count.

        Raises:
            IndexError: If nothing has been pushed
        """
        if not self._stack:
            raise IndexError("pop from an empty parenthesis stack")
        self.count = self._stack.pop()
        return self

    def closes_frame(self) -> bool:
        """Whether more parentheses closed than opened since the last push."""
        return self.count < 0 and bool(self._stack)

    @property
    def depth(self) -> int:
        """Number of saved frames."""
        return len(self._stack)


class FunctionTracker:
    """Nesting depth of function-call argument lists."""

    def __init__(self):
        self.count = 0

    def increment(self) -> "FunctionTracker":
        self.count += 1
        return self

    def decrement(self) -> "FunctionTracker":
        if self.count > 0:
            self.count -= 1
        return self

    def in_function(self) -> bool:
        return self.count > 0


class FieldTracker:
    """Field-list context: whether a top-level comma breaks the line.

    True inside a SELECT column list, a SET assignment list, an ORDER/GROUP BY
    list and a FROM list.

    Attributes:
        newline: Current "newline allowed" flag
    """

    def __init__(self):
        self._stack: List[bool] = []
        self.newline = False

    def push(self) -> "FieldTracker":
        self._stack.append(self.newline)
        self.newline = False
        return self

    def pop(self) -> "FieldTracker":
        if not self._stack:
            raise IndexError("pop from an empty field stack")
        self.newline = self._stack.pop()
        return self

    def to_newline(self) -> "FieldTracker":
        self.newline = True
        return self

    def to_not_newline(self) -> "FieldTracker":
        self.newline = False
        return self


class ClauseTracker:
    """Clause-level flags of the innermost SELECT.

    An ON condition remembers the parenthesis count it started at, so only a
    comma back at that level ends it; commas inside ``in (1, 2)`` or a nested
    call belong to the condition.

    Attributes:
        in_clause: A qualifier (inner, left, order, ...) awaits its keyword
        after_on: An ON condition is open
        on_level: Parenthesis count where the open ON condition started
        after_between: A BETWEEN awaits its AND
    """

    def __init__(self):
        self._stack: List[tuple] = []
        self.reset()

    def reset(self) -> "ClauseTracker":
        self.in_clause = False
        self.after_on = False
        self.on_level = 0
        self.after_between = False
        return self

    def push(self) -> "ClauseTracker":
        """Save the flags and start a fresh SELECT with none set."""
        self._stack.append((self.in_clause, self.after_on, self.on_level, self.after_between))
        return self.reset()

    def pop(self) -> "ClauseTracker":
        if not self._stack:
            raise IndexError("pop from an empty clause stack")
        self.in_clause, self.after_on, self.on_level, self.after_between = self._stack.pop()
        return self

    def open_on(self, level: int) -> "ClauseTracker":
        self.after_on = True
        self.on_level = level
        return self

    def ends_on(self, level: int) -> bool:
        """Whether a comma at this parenthesis count ends the open ON condition."""
        return self.after_on and level == self.on_level

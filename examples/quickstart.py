"""Quickstart example for lsysengine.

This example demonstrates grammar construction, expansion, length
prediction, and expansion limits.

Run this example:
    python examples/quickstart.py

Python 3.13+.
"""

from lsysengine import (
    ExpansionLimits,
    Grammar,
    InvalidGrammarError,
    ResourceLimitExceededError,
    expand,
    expansion_length,
    iter_generations,
    validate_grammar,
)

# Example 1: Explicit grammar
print("=" * 50)
print("Example 1: Explicit Grammar")
print("=" * 50)

algae = Grammar(
    variables={"A", "B"},
    constants={"+"},
    start=["A"],
    rules={"A": ["A", "+", "B"], "B": ["A"]},
)

for n in range(4):
    print(n, "".join(expand(algae, n)))
# Output:
# 0 A
# 1 A+B
# 2 A+B+A
# 3 A+B+A+A+B

# Example 2: Alphabet inferred from the rules
print("\n" + "=" * 50)
print("Example 2: Grammar.from_rules")
print("=" * 50)

koch = Grammar.from_rules("F", {"F": "F+F-F-F+F"})
print("variables:", sorted(koch.variables))
print("constants:", sorted(koch.constants))
print("".join(expand(koch, 1)))
# Output: F+F-F-F+F

# Example 3: Generations one at a time
print("\n" + "=" * 50)
print("Example 3: iter_generations")
print("=" * 50)

fibonacci = Grammar.from_rules("A", {"A": "AB", "B": "A"})
for generation in iter_generations(fibonacci, 5):
    print(len(generation), "".join(generation))
# Output lengths follow the Fibonacci sequence: 1, 2, 3, 5, 8, 13

# Example 4: Length prediction without expanding
print("\n" + "=" * 50)
print("Example 4: expansion_length")
print("=" * 50)

print(expansion_length(fibonacci, 40))
# Output: 267914296

# Example 5: Expansion limits
print("\n" + "=" * 50)
print("Example 5: ExpansionLimits")
print("=" * 50)

try:
    expand(fibonacci, 40, limits=ExpansionLimits(max_symbols=1_000_000))
except ResourceLimitExceededError as e:
    print(f"Rejected before expanding: requested={e.requested}, limit={e.limit}")

# Example 6: Validation
print("\n" + "=" * 50)
print("Example 6: Validation")
print("=" * 50)

try:
    Grammar(variables={"A"}, constants={"A"}, start=["A"], rules={"C": ["A"]})
except InvalidGrammarError as e:
    for error in e.errors:
        print(error.format())

result = validate_grammar({"A", "B", "C"}, {"+"}, ["A"], {"A": ["A", "+"], "C": ["A"]})
print(result.format())
# Valid grammar with warnings for the rule-less variable B and unreachable rule C

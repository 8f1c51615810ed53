"""
Example 03:
Invalid inputs are reported as failure records
"""

from scurved import compute_curved_beam, validate


# 1. Check raw form input before solving
print(validate('triangular', {'b_inner': '0', 'b_outer': '', 't': '0.02'}))

# 2. Failures do not raise
cases = [
    ('hexagonal', {'b': 0.02}, 0.05, 1000),
    ('circular', {'d': -0.04}, 0.05, 1000),
    ('rectangular', {'b': 0.02, 't': 0.02}, None, 1000),
    ('rectangular', {'b': 0.02, 't': 0.02}, 0.05, None),
    ('rectangular', {'b': 0.02, 't': 0.02}, 1e6, 1000),
]

print("=== Failure Records ===")
for shape, params, ri, M in cases:
    res = compute_curved_beam(shape, params, ri=ri, moment=M)
    print(f"{shape:12} ok={res.ok} {res.to_dict()}")

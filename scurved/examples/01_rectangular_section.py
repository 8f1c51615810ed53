"""
Example 01:
Curved beam with a rectangular cross-section
σ(r) = M / (A e) * (R_n / r - 1)
"""

from scurved import compute_curved_beam


# 1. Section: width 20 mm, radial thickness 20 mm, inner radius 50 mm
params = {'b': 0.02, 't': 0.02}
ri = 0.05

# 2. Load: bending moment in Nm
M = 1000

# 3. Solve
res = compute_curved_beam('rectangular', params, ri=ri, moment=M)

# 4. Results
print("=== Curved Beam, Rectangular Section ===")
print(res.table())
print(f"Max. tension     = {res.max_tension.value:.3e} at r = "
      f"{res.max_tension.at_r} ({res.max_tension.side})")
print(f"Max. compression = {res.max_compression.value:.3e} at r = "
      f"{res.max_compression.at_r} ({res.max_compression.side})")

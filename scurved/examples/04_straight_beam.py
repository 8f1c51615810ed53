"""
Example 04:
Straight simply supported beam for comparison
"""

from scurved import SimplySupportedBeam


# 1. Span 4 m, 4 segments
beam = SimplySupportedBeam(4.0, n_disc=4)

# 2. Loads
w = 10.0   # uniformly distributed load
P = 10.0   # point load at mid-span

# 3. Results
print("=== Simply Supported Beam ===")
print(f"M_max (udl)       = {beam.max_moment_udl(w)}")
print(f"M_max (point)     = {beam.max_moment_point_mid(P)}")
print(f"δ_max (udl)       = {beam.max_deflection_udl(w, 2e8, 1e-4):.4e}")
print("V and M under the uniform load:")
print(beam.udl_forces_disc(w))

"""
Example 02:
Curved beam with a T-section placed at absolute radii
"""

from scurved import CurvedBeamPlot, TSection, compute_curved_beam


# 1. Flange on the inside (r = 50...60 mm), web on the outside
#    (r = 60...100 mm). The section fixes its own inner radius.
params = dict(r1=0.05, t1=0.01, b1=0.06, r2=0.06, t2=0.04, b2=0.01)

# 2. Load given as force and lever arm: M = P * d
res = compute_curved_beam('tsection', params, force=2000, lever_arm=0.5,
                          samples=11)

# 3. Results
print("=== Curved Beam, T-Section ===")
print(res.table())
print(res.samples_table())

# 4. Plot stress distribution and section
plot = CurvedBeamPlot(res, TSection(**params).profile())
plot.show('stress')
plot.show('section')

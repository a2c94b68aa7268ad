# examples/minimal_orbit.py
from gravity_sandbox import GravitySimulation

sim = GravitySimulation()

# Roughly circular speed at r=30 with the default constants
sim.add_body(30.0, 0.0, 0.0, 4.9e-12)

for frame in range(200):
    sim.step()
    sim.remove_out_of_range(120.0, 70.0)
    if sim.get_planet_count() == 0:
        break

print("frames:", frame + 1)
for p in sim.get_planets():
    print("pos:", (p.x, p.y), "vel:", (p.vx, p.vy))

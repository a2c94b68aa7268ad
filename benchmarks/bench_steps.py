"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sandbox.config import SimulationConfig
from gravity_sandbox.core.invariants import kinetic_energy, central_potential_energy
from gravity_sandbox.profiler import Profiler
from gravity_sandbox.simulation import GravitySimulation

def run(n: int, cutoff: float, steps: int = 300):
    prof = Profiler()
    # capacity raised so nothing is evicted; removal is not exercised here
    cfg = SimulationConfig(max_bodies=n, max_force_distance=cutoff)
    sim = GravitySimulation(config=cfg, profiler=prof, rng=np.random.default_rng(12345))

    rng = np.random.default_rng(12345)  # determinism
    for _ in range(n):
        r = 15.0 + 30.0 * float(rng.random())
        theta = 2.0 * np.pi * float(rng.random())
        v = np.sqrt(cfg.gravitational_constant * cfg.central_mass / (r * cfg.distance_scale_sq))
        sim.add_body(r * np.cos(theta), r * np.sin(theta), -v * np.sin(theta), v * np.cos(theta))

    e0 = kinetic_energy(sim._bodies, cfg.body_mass) + central_potential_energy(sim._bodies, cfg)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    e1 = kinetic_energy(sim._bodies, cfg.body_mass) + central_potential_energy(sim._bodies, cfg)
    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary(), (e1 - e0) / abs(e0)

if __name__ == "__main__":
    for cutoff in [10.0, 100.0]:
        print(f"cutoff={cutoff}")
        for n in [10, 50, 100, 250]:
            per_step, summary, drift = run(n, cutoff)
            print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  energy drift={drift:+.2e}")
            for k in ["forces", "integrate", "trails"]:
                if k in summary:
                    print(" ", k, summary[k])
        print()

"""
Microbenchmark: time per step vs number of particles.
The force phase is O(N²), so expect roughly quadratic growth.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from particle_box.config import SimulationConfig
from particle_box.profiler import Profiler
from particle_box.system import ParticleSystem

def run(n: int, steps: int = 100):
    prof = Profiler()
    system = ParticleSystem(
        config=SimulationConfig(k_electrostatic=0.5, k_gravity=1.0),
        profiler=prof,
    )
    system.spawn_random(n, rng=np.random.default_rng(12345))

    # warmup
    for _ in range(10):
        system.step(1 / 60)
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(steps):
        system.step(1 / 60)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 50, 100, 200]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()

# examples/random_box.py
"""
Headless version of the interactive box: random particles, a fixed frame
rate, and the speed / energy read-outs a UI would bin into histograms.
"""
import logging

import numpy as np

from particle_box import ParticleSystem, SimulationConfig
from particle_box.core import kinetic_energy, speeds

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

system = ParticleSystem(config=SimulationConfig(k_electrostatic=0.5, k_gravity=1.0))
system.spawn_random(30, rng=np.random.default_rng(0))

fps = 60
for frame in range(5 * fps):
    system.step(1 / fps)
    if frame % fps == 0:
        v = speeds(system.particles)
        print(f"t={system.time:5.2f}  E_kin={kinetic_energy(system.particles):8.4f}  "
              f"v_mean={v.mean():.4f}  v_max={v.max():.4f}")

# A click in the UI inserts a particle mid-run
clicked = system.create((0.5, 0.9), charge=-1.0, mass=1.0)
for _ in range(fps):
    system.step(1 / fps)
print("tracked particle", clicked.id, "at", system.get(clicked.id).position)

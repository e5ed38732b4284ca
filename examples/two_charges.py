# examples/two_charges.py
import logging

from particle_box import ParticleSystem, SimulationConfig

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Two like charges repel along x; gravity and drag off to isolate the pair force
config = SimulationConfig(k_electrostatic=1.0, enable_gravity=False, enable_drag=False)
system = ParticleSystem(config=config)

a = system.create((0.4, 0.5), charge=+1.0, mass=0.5)
b = system.create((0.6, 0.5), charge=+1.0, mass=0.5)

for _ in range(10):
    system.step(0.01)

print("t:", system.time)
print("a pos", a.position, "v", a.velocity, "acc", a.acceleration)
print("b pos", b.position, "v", b.velocity, "acc", b.acceleration)

import os
import tempfile

from mass_spring.io import load_system, save_system
from mass_spring import MassSpringSystem

system = MassSpringSystem(mass=0.5, damping=0.1, spring_constant=2.0, y0=0.0, v0=1.0)
system.set_forcing("square", {"amplitude": 0.3, "frequency": 0.5})
system.run(0.016, 300)

path = os.path.join(tempfile.gettempdir(), "mass_spring_demo.json")
save_system(system, path)
resumed = load_system(path)

print("saved to", path)
print("original:", system.step(0.016))
print("resumed: ", resumed.step(0.016))

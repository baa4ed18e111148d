from mass_spring import MassSpringSystem
from mass_spring.recorder import HistoryBuffer
import numpy as np

system = MassSpringSystem(mass=1.0, damping=0.05, spring_constant=1.0, y0=0.0, v0=0.0)
f0 = system.get_system_properties().f0

# Drive exactly at the natural frequency
system.set_forcing("sine", {"amplitude": 0.1, "frequency": f0})

history = HistoryBuffer()
system.run(0.1, 600, sink=history)

t, y = history.times(), history.positions()
for t_end in (10, 20, 30, 40, 50, 60):
    window = (t > t_end - 10) & (t <= t_end)
    print(f"t <= {t_end:2d} s  peak |y| = {np.max(np.abs(y[window])):.4f} m")

print("steady-state amplitude F/(b·ω0):", 0.1 / (0.05 * 2 * np.pi * f0))

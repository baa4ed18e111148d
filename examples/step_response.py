from mass_spring import MassSpringSystem

regimes = [("underdamped", 0.5), ("critical", 2.0), ("overdamped", 5.0)]

systems = []
for label, b in regimes:
    s = MassSpringSystem(mass=1.0, damping=b, spring_constant=1.0, y0=0.0, v0=0.0)
    s.set_forcing("step", {"amplitude": 1.0, "step_time": 0.0})
    assert s.get_system_properties().regime == label
    systems.append(s)

print("Time (s) | " + " | ".join(f"{label:>11}" for label, _ in regimes))
for i in range(51):
    if i % 5 == 0:
        t = systems[0].time
        print(f"{t:8.1f} | " + " | ".join(f"{s.get_state().position:11.6f}" for s in systems))
    for s in systems:
        s.step(0.1)

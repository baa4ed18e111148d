from mass_spring import MassSpringSystem
from mass_spring.recorder import TextSink

system = MassSpringSystem(mass=1.0, damping=0.2, spring_constant=1.0, y0=1.0, v0=0.0)

props = system.get_system_properties()
print("regime:", props.regime)
print(f"zeta: {props.zeta:.3f}  f_d: {props.f_d:.3f} Hz  Q: {props.quality_factor:.2f}")

sink = TextSink(energy_of=system.get_energy)
sink.header()
sink.record_system(system)
system.run(0.1, 20, sink=sink)

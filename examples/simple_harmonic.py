# examples/simple_harmonic.py
from mass_spring import MassSpringSystem
from mass_spring.recorder import TextSink

system = MassSpringSystem(mass=1.0, damping=0.0, spring_constant=1.0, y0=1.0, v0=0.0)

props = system.get_system_properties()
print(f"Natural frequency: {props.f0:.3f} Hz")
print(f"Period: {props.period:.3f} s")
print(f"Damping regime: {props.regime}")
print()

sink = TextSink(energy_of=system.get_energy)
sink.header()
sink.record_system(system)
system.run(0.1, 20, sink=sink)

print()
print("Energy stays constant: no damping, no forcing.")

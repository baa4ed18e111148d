"""
Microbenchmark: RK4 vs Euler accuracy and time per step.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from mass_spring import MassSpringSystem
from mass_spring.types import State
from mass_spring.core.integrators import integrate
from mass_spring.core.invariants import energy_drift
from mass_spring.profiler import Profiler


def shm(y, v, t):
    return v, -y


def accuracy(dt: float, t_end: float = 10.0):
    n = int(round(t_end / dt))
    start = State(position=1.0, velocity=0.0, time=0.0)
    out = {}
    for method in ("euler", "rk4"):
        traj = integrate(start, shm, dt, n, method=method)
        err = float(np.max(np.abs(traj[:, 1] - np.cos(traj[:, 0]))))
        drift = energy_drift(0.5 * traj[:, 1] ** 2 + 0.5 * traj[:, 2] ** 2)
        out[method] = (err, drift)
    return out


def run(steps: int = 20000):
    prof = Profiler()
    system = MassSpringSystem(mass=1.0, damping=0.1, spring_constant=1.0, profiler=prof)
    system.set_forcing("sine", {"amplitude": 0.5, "frequency": 0.3})

    # warmup
    system.run(0.016, 100)

    t0 = time.perf_counter()
    system.run(0.016, steps)
    t1 = time.perf_counter()
    return (t1 - t0) / steps, prof.stats.summary()


if __name__ == "__main__":
    for dt in [0.1, 0.05, 0.01, 0.005]:
        res = accuracy(dt)
        (e_err, e_drift), (r_err, r_drift) = res["euler"], res["rk4"]
        print(f"dt={dt:6.3f}  euler err={e_err:.3e} drift={e_drift:.3e}  "
              f"rk4 err={r_err:.3e} drift={r_drift:.3e}  ratio={e_err / r_err:8.1f}")
    print()

    per_step, summary = run()
    print(f"system.step  {1e6 * per_step:8.2f} us/step  steps/s={1 / per_step:10.1f}")
    print(" ", "step", summary["step"])

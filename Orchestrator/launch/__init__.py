from .outcome import LaunchOutcome, LaunchProgress, LaunchState, format_elapsed
from .probes import PosixReadinessProbe, ReadinessProbe, WindowsReadinessProbe, default_probe_factory
from .supervisor import LaunchSupervisor, launch, spawn_process
from .session import LaunchSession

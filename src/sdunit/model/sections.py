# topmark:header:start
#
#   project      : SdUnit
#   file         : sections.py
#   file_relpath : src/sdunit/model/sections.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Section records of a service unit: `Unit`, `Service`, `Install` and `Socket`.

Each record is a frozen dataclass with one string attribute per supported
directive, all defaulting to ``""`` (absent). Its ``FIELDS`` table lists the
attribute name and the annotation for every directive in emission order; an
annotation carrying ``omitempty`` marks a directive as optional.

Systemd "booleans" may be written as ``yes``/``no``/``true``/``false``; values are
stored and emitted verbatim, without validation.

See https://www.freedesktop.org/software/systemd/man/latest/systemd.directives.html
for the directive reference.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from sdunit.config.keys import SectionName
from sdunit.model.fields import FieldDescriptor, FieldSpec, field_descriptors, field_table
from sdunit.model.projector import project, record_from_mapping

S = TypeVar("S", bound="SectionRecord")


class SectionRecord:
    """Behavior shared by all section records.

    Subclasses are frozen dataclasses that set ``SECTION`` and ``FIELDS``.
    """

    __slots__ = ()

    SECTION: ClassVar[str]
    FIELDS: ClassVar[tuple[FieldSpec, ...]]

    def descriptors(self) -> tuple[FieldDescriptor, ...]:
        """Return the field descriptors of this record."""
        return field_descriptors(self)

    def to_mapping(self) -> dict[str, str]:
        """Return the key/value pairs emitted for this section."""
        return project(self.descriptors())

    def is_empty(self) -> bool:
        """True if no field holds a value."""
        return all(d.value is None for d in self.descriptors())

    @classmethod
    def from_mapping(cls: type[S], entries: Mapping[str, object], *, strict: bool = False) -> S:
        """Build a record from emitted-key entries.

        See [`record_from_mapping`][sdunit.model.projector.record_from_mapping].
        """
        return record_from_mapping(cls, entries, strict=strict)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the emitted keys of this section, in order."""
        return tuple(spec.key for spec in cls.FIELDS)

    @classmethod
    def required_keys(cls) -> tuple[str, ...]:
        """Return the keys that are emitted even when empty."""
        return tuple(spec.key for spec in cls.FIELDS if spec.required)


@dataclass(frozen=True, slots=True)
class Unit(SectionRecord):
    """The ``[Unit]`` section: metadata and dependencies of the unit.

    ``Description`` is required; every other directive is optional.

    Attributes:
        description (str): Short explanation of the unit and its functionality.
        documentation (str): URIs referencing documentation for the unit.
        requires (str): Units that must be started along with this unit.
        requisite (str): Like ``Requires``, but fails if the units are not already started.
        wants (str): Weaker ``Requires``; missing or failing units are tolerated.
        binds_to (str): Stronger ``Requires``; this unit stops when the listed units stop.
        part_of (str): Stop/restart of the listed units propagates to this unit.
        conflicts (str): Units that cannot run simultaneously with this unit.
        before (str): Units to start after this one.
        after (str): Units to start before this one.
        on_failure (str): Units activated when this unit fails.
        source_path (str): Path of the configuration file the unit was generated from.
    """

    description: str = ""
    documentation: str = ""

    # Dependencies
    requires: str = ""
    requisite: str = ""
    wants: str = ""
    binds_to: str = ""
    part_of: str = ""
    conflicts: str = ""

    # Ordering
    before: str = ""
    after: str = ""

    on_failure: str = ""
    propagates_reload_to: str = ""
    reload_propagated_from: str = ""
    joins_namespace_of: str = ""
    requires_mounts_for: str = ""
    on_failure_job_mode: str = ""
    ignore_on_isolate: str = ""
    stop_when_unneeded: str = ""
    refuse_manual_start: str = ""
    refuse_manual_stop: str = ""
    allow_isolate: str = ""
    default_dependencies: str = ""

    # Job and start rate limiting
    job_timeout_sec: str = ""
    job_timeout_action: str = ""
    start_limit_interval_sec: str = ""
    start_limit_action: str = ""

    condition: str = ""
    assert_: str = ""
    source_path: str = ""

    SECTION: ClassVar[str] = SectionName.UNIT
    FIELDS: ClassVar[tuple[FieldSpec, ...]] = field_table(
        ("description", "Description"),
        ("documentation", "Documentation,omitempty"),
        ("requires", "Requires,omitempty"),
        ("requisite", "Requisite,omitempty"),
        ("wants", "Wants,omitempty"),
        ("binds_to", "BindsTo,omitempty"),
        ("part_of", "PartOf,omitempty"),
        ("conflicts", "Conflicts,omitempty"),
        ("before", "Before,omitempty"),
        ("after", "After,omitempty"),
        ("on_failure", "OnFailure,omitempty"),
        ("propagates_reload_to", "PropagatesReloadTo,omitempty"),
        ("reload_propagated_from", "ReloadPropagatedFrom,omitempty"),
        ("joins_namespace_of", "JoinsNamespaceOf,omitempty"),
        ("requires_mounts_for", "RequiresMountsFor,omitempty"),
        ("on_failure_job_mode", "OnFailureJobMode,omitempty"),
        ("ignore_on_isolate", "IgnoreOnIsolate,omitempty"),
        ("stop_when_unneeded", "StopWhenUnneeded,omitempty"),
        ("refuse_manual_start", "RefuseManualStart,omitempty"),
        ("refuse_manual_stop", "RefuseManualStop,omitempty"),
        ("allow_isolate", "AllowIsolate,omitempty"),
        ("default_dependencies", "DefaultDependencies,omitempty"),
        ("job_timeout_sec", "JobTimeoutSec,omitempty"),
        ("job_timeout_action", "JobTimeoutAction,omitempty"),
        ("start_limit_interval_sec", "StartLimitIntervalSec,omitempty"),
        ("start_limit_action", "StartLimitAction,omitempty"),
        ("condition", "Condition,omitempty"),
        ("assert_", "Assert,omitempty"),
        ("source_path", "SourcePath,omitempty"),
    )


@dataclass(frozen=True, slots=True)
class Service(SectionRecord):
    """The ``[Service]`` section: how the service process is started and managed.

    ``ExecStart`` is required and always emitted; every other directive is
    optional. Common ``Type`` values are ``simple``, ``exec``, ``forking``,
    ``oneshot``, ``dbus``, ``notify`` and ``idle``.
    """

    type: str = ""

    # Commands
    exec_start: str = ""
    exec_start_pre: str = ""
    exec_start_post: str = ""
    exec_stop: str = ""
    exec_reload: str = ""

    remain_after_exit: str = ""
    restart: str = ""

    # Timeouts
    timeout_sec: str = ""
    timeout_start_sec: str = ""
    timeout_stop_sec: str = ""

    # Execution environment
    environment: str = ""
    environment_file: str = ""
    working_directory: str = ""
    root_directory: str = ""
    user: str = ""
    group: str = ""
    umask: str = ""

    # Standard streams
    standard_error: str = ""
    standard_input: str = ""
    standard_output: str = ""

    limit_nofile: str = ""
    limit_nproc: str = ""

    # Restart behavior
    restart_sec: str = ""
    success_exit_status: str = ""
    restart_prevent_exit_status: str = ""
    restart_force_exit_status: str = ""
    permissions_start_only: str = ""
    root_directory_start_only: str = ""
    non_blocking: str = ""
    notify_access: str = ""
    sockets: str = ""
    success_action: str = ""
    failure_action: str = ""

    # Resource control
    cpu_weight: str = ""
    startup_cpu_weight: str = ""
    cpu_quota: str = ""
    memory_limit: str = ""
    tasks_max: str = ""

    # Capabilities and sandboxing
    ambient_capabilities: str = ""
    capability_bounding_set: str = ""
    protect_system: str = ""
    protect_home: str = ""
    private_tmp: str = ""
    private_devices: str = ""
    private_network: str = ""
    read_write_paths: str = ""
    read_only_paths: str = ""
    inaccessible_paths: str = ""
    no_new_privileges: str = ""

    SECTION: ClassVar[str] = SectionName.SERVICE
    FIELDS: ClassVar[tuple[FieldSpec, ...]] = field_table(
        ("type", "Type,omitempty"),
        ("exec_start", "ExecStart"),
        ("exec_start_pre", "ExecStartPre,omitempty"),
        ("exec_start_post", "ExecStartPost,omitempty"),
        ("exec_stop", "ExecStop,omitempty"),
        ("exec_reload", "ExecReload,omitempty"),
        ("remain_after_exit", "RemainAfterExit,omitempty"),
        ("restart", "Restart,omitempty"),
        ("timeout_sec", "TimeoutSec,omitempty"),
        ("timeout_start_sec", "TimeoutStartSec,omitempty"),
        ("timeout_stop_sec", "TimeoutStopSec,omitempty"),
        ("environment", "Environment,omitempty"),
        ("environment_file", "EnvironmentFile,omitempty"),
        ("working_directory", "WorkingDirectory,omitempty"),
        ("root_directory", "RootDirectory,omitempty"),
        ("user", "User,omitempty"),
        ("group", "Group,omitempty"),
        ("umask", "UMask,omitempty"),
        ("standard_error", "StandardError,omitempty"),
        ("standard_input", "StandardInput,omitempty"),
        ("standard_output", "StandardOutput,omitempty"),
        ("limit_nofile", "LimitNOFILE,omitempty"),
        ("limit_nproc", "LimitNPROC,omitempty"),
        ("restart_sec", "RestartSec,omitempty"),
        ("success_exit_status", "SuccessExitStatus,omitempty"),
        ("restart_prevent_exit_status", "RestartPreventExitStatus,omitempty"),
        ("restart_force_exit_status", "RestartForceExitStatus,omitempty"),
        ("permissions_start_only", "PermissionsStartOnly,omitempty"),
        ("root_directory_start_only", "RootDirectoryStartOnly,omitempty"),
        ("non_blocking", "NonBlocking,omitempty"),
        ("notify_access", "NotifyAccess,omitempty"),
        ("sockets", "Sockets,omitempty"),
        ("success_action", "SuccessAction,omitempty"),
        ("failure_action", "FailureAction,omitempty"),
        ("cpu_weight", "CPUWeight,omitempty"),
        ("startup_cpu_weight", "StartupCPUWeight,omitempty"),
        ("cpu_quota", "CPUQuota,omitempty"),
        ("memory_limit", "MemoryLimit,omitempty"),
        ("tasks_max", "TasksMax,omitempty"),
        ("ambient_capabilities", "AmbientCapabilities,omitempty"),
        ("capability_bounding_set", "CapabilityBoundingSet,omitempty"),
        ("protect_system", "ProtectSystem,omitempty"),
        ("protect_home", "ProtectHome,omitempty"),
        ("private_tmp", "PrivateTmp,omitempty"),
        ("private_devices", "PrivateDevices,omitempty"),
        ("private_network", "PrivateNetwork,omitempty"),
        ("read_write_paths", "ReadWritePaths,omitempty"),
        ("read_only_paths", "ReadOnlyPaths,omitempty"),
        ("inaccessible_paths", "InaccessiblePaths,omitempty"),
        ("no_new_privileges", "NoNewPrivileges,omitempty"),
    )


@dataclass(frozen=True, slots=True)
class Install(SectionRecord):
    """The ``[Install]`` section, used by ``systemctl enable``/``disable``.

    All directives are optional.

    Attributes:
        wanted_by (str): Targets that gain a ``Wants=`` dependency on this unit when enabled.
        required_by (str): Like ``WantedBy``, but creates a ``Requires=`` dependency.
        alias (str): Space-separated additional names the unit is installed under.
        also (str): Units enabled/disabled together with this one.
        default_instance (str): Default instance name for template units.
    """

    wanted_by: str = ""
    required_by: str = ""
    alias: str = ""
    also: str = ""
    default_instance: str = ""

    SECTION: ClassVar[str] = SectionName.INSTALL
    FIELDS: ClassVar[tuple[FieldSpec, ...]] = field_table(
        ("wanted_by", "WantedBy,omitempty"),
        ("required_by", "RequiredBy,omitempty"),
        ("alias", "Alias,omitempty"),
        ("also", "Also,omitempty"),
        ("default_instance", "DefaultInstance,omitempty"),
    )


@dataclass(frozen=True, slots=True)
class Socket(SectionRecord):
    """The ``[Socket]`` section describing socket activation.

    The section itself is optional in a daemon, and every directive in it is optional.
    """

    # Listeners
    listen_stream: str = ""
    listen_datagram: str = ""
    listen_sequential_packet: str = ""
    listen_fifo: str = ""
    listen_special: str = ""
    listen_netlink: str = ""
    listen_message_queue: str = ""

    # Socket file ownership
    socket_mode: str = ""
    socket_user: str = ""
    socket_group: str = ""
    socket_protocol: str = ""
    bind_to_device: str = ""

    service: str = ""
    pass_credentials: str = ""
    pass_security: str = ""
    receive_buffer: str = ""
    send_buffer: str = ""
    max_connections: str = ""
    max_connections_per_source: str = ""

    # TCP keepalive
    keep_alive: str = ""
    keep_alive_time_sec: str = ""
    keep_alive_interval_sec: str = ""
    keep_alive_probes: str = ""

    no_delay: str = ""
    priority: str = ""
    defer_accept_sec: str = ""
    accept: str = ""
    writable: str = ""
    trigger_limit_interval_sec: str = ""
    trigger_limit_burst: str = ""

    SECTION: ClassVar[str] = SectionName.SOCKET
    FIELDS: ClassVar[tuple[FieldSpec, ...]] = field_table(
        ("listen_stream", "ListenStream,omitempty"),
        ("listen_datagram", "ListenDatagram,omitempty"),
        ("listen_sequential_packet", "ListenSequentialPacket,omitempty"),
        ("listen_fifo", "ListenFIFO,omitempty"),
        ("listen_special", "ListenSpecial,omitempty"),
        ("listen_netlink", "ListenNetlink,omitempty"),
        ("listen_message_queue", "ListenMessageQueue,omitempty"),
        ("socket_mode", "SocketMode,omitempty"),
        ("socket_user", "SocketUser,omitempty"),
        ("socket_group", "SocketGroup,omitempty"),
        ("socket_protocol", "SocketProtocol,omitempty"),
        ("bind_to_device", "BindToDevice,omitempty"),
        ("service", "Service,omitempty"),
        ("pass_credentials", "PassCredentials,omitempty"),
        ("pass_security", "PassSecurity,omitempty"),
        ("receive_buffer", "ReceiveBuffer,omitempty"),
        ("send_buffer", "SendBuffer,omitempty"),
        ("max_connections", "MaxConnections,omitempty"),
        ("max_connections_per_source", "MaxConnectionsPerSource,omitempty"),
        ("keep_alive", "KeepAlive,omitempty"),
        ("keep_alive_time_sec", "KeepAliveTimeSec,omitempty"),
        ("keep_alive_interval_sec", "KeepAliveIntervalSec,omitempty"),
        ("keep_alive_probes", "KeepAliveProbes,omitempty"),
        ("no_delay", "NoDelay,omitempty"),
        ("priority", "Priority,omitempty"),
        ("defer_accept_sec", "DeferAcceptSec,omitempty"),
        ("accept", "Accept,omitempty"),
        ("writable", "Writable,omitempty"),
        ("trigger_limit_interval_sec", "TriggerLimitIntervalSec,omitempty"),
        ("trigger_limit_burst", "TriggerLimitBurst,omitempty"),
    )


SECTION_TYPES: tuple[type[SectionRecord], ...] = (Unit, Service, Install, Socket)

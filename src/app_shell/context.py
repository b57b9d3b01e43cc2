from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from src.adapters.auth.crypto import Argon2AuthAdapter
from src.adapters.clock import SystemClock
from src.adapters.gemini_advisory import DisabledAdvisory, GeminiAdvisoryAdapter
from src.adapters.local_storage import InMemoryBackend, create_local_storage
from src.app_shell.state import AppState
from src.components.advisory import AdvisoryPort, InsightPanel
from src.components.auth import AuthAdapterPort, AuthService
from src.components.bootstrap import BootstrapInput, BootstrapOutput, run_bootstrap
from src.components.branches import BranchService
from src.components.dashboard import DashboardController
from src.components.durable_store import DurableStore, KeyValueBackendPort
from src.components.orders import OrderService
from src.components.settings import SettingsService
from src.config.loader import advisory_api_key
from src.config.models import PosConfig
from src.ports.clock import ClockPort

logger = logging.getLogger(__name__)


def create_backend(config: PosConfig) -> KeyValueBackendPort:
    if config.storage.backend == "memory":
        return InMemoryBackend()
    return create_local_storage(config.storage.data_dir, namespace=config.storage.namespace)


def create_advisory(config: PosConfig) -> AdvisoryPort:
    if not config.advisory.enabled:
        return DisabledAdvisory()
    return GeminiAdvisoryAdapter(
        advisory_api_key(config),
        model=config.advisory.model,
        endpoint=config.advisory.endpoint,
        timeout_seconds=config.advisory.timeout_seconds,
    )


@dataclass
class ServiceContext:
    config: PosConfig
    store: DurableStore
    state: AppState
    clock: ClockPort
    auth_adapter: AuthAdapterPort
    auth_service: AuthService
    settings_service: SettingsService
    branch_service: BranchService
    order_service: OrderService
    dashboard: DashboardController
    insight_panel: InsightPanel

    @classmethod
    def create(
        cls,
        config: PosConfig,
        *,
        backend: KeyValueBackendPort | None = None,
        clock: ClockPort | None = None,
        advisory: AdvisoryPort | None = None,
        auth_adapter: AuthAdapterPort | None = None,
    ) -> ServiceContext:
        # Adapters
        store = DurableStore(backend or create_backend(config))
        clock = clock or SystemClock(config.app.timezone)
        advisory = advisory or create_advisory(config)
        auth_adapter = auth_adapter or Argon2AuthAdapter()

        # State
        state = AppState.open(store)
        logger.info("Opened %s storage (%d orders)", config.storage.backend, len(state.orders.value))

        # Services
        dashboard = DashboardController(
            state.orders,
            state.branches,
            state.settings,
            clock,
            advisory,
            system_instruction=config.advisory.system_instruction,
        )

        return cls(
            config=config,
            store=store,
            state=state,
            clock=clock,
            auth_adapter=auth_adapter,
            auth_service=AuthService(state.staff, state.current_user, auth_adapter),
            settings_service=SettingsService(state.settings),
            branch_service=BranchService(state.branches),
            order_service=OrderService(state.orders, state.branches, clock),
            dashboard=dashboard,
            insight_panel=dashboard.open_insight_panel(),
        )

    def bootstrap(self) -> BootstrapOutput:
        rules = self.config.bootstrap
        return run_bootstrap(
            BootstrapInput(
                username=rules.admin_username,
                name=rules.admin_name,
                password=os.environ.get(rules.password_env),
                enabled_if_no_staff=rules.enabled_if_no_staff,
            ),
            self.state.staff,
            self.auth_adapter,
            branch_ids=[b.id for b in self.state.branches.value],
        )

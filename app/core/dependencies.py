# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from app.repositories.history_repository import HistoryRepository
from app.repositories.matrix_repository import MatrixRepository
from app.repositories.roster_repository import RosterRepository
from app.repositories.staff_repository import StaffRepository
from app.services.dashboard_service import DashboardService
from app.services.roster_service import RosterService
from app.services.staff_service import StaffService
from app.services.training_service import TrainingService

# ── Singleton repository instances (in-memory stores) ──
_roster_repo = RosterRepository()
_staff_repo = StaffRepository()
_matrix_repo = MatrixRepository()
_history_repo = HistoryRepository()

# ── Service instances (with injected dependencies) ──
_roster_service = RosterService(
    roster_repo=_roster_repo,
    history_repo=_history_repo,
)
_staff_service = StaffService(
    staff_repo=_staff_repo,
    matrix_repo=_matrix_repo,
    history_repo=_history_repo,
)
_training_service = TrainingService(
    matrix_repo=_matrix_repo,
    staff_repo=_staff_repo,
    history_repo=_history_repo,
)
_dashboard_service = DashboardService(
    roster_service=_roster_service,
    staff_service=_staff_service,
)


# ── FastAPI dependency functions ──
def get_roster_service() -> RosterService:
    return _roster_service


def get_staff_service() -> StaffService:
    return _staff_service


def get_training_service() -> TrainingService:
    return _training_service


def get_dashboard_service() -> DashboardService:
    return _dashboard_service


def get_roster_repo() -> RosterRepository:
    return _roster_repo


def get_staff_repo() -> StaffRepository:
    return _staff_repo


def get_matrix_repo() -> MatrixRepository:
    return _matrix_repo


def get_history_repo() -> HistoryRepository:
    return _history_repo

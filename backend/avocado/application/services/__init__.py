from .ai_gateway_service import AIGatewayService
from .auth_service import AuthService
from .comment_service import CommentService
from .latency import BackendOperation, SimulatedLatency
from .project_service import ProjectService
from .task_service import TaskService

__all__ = [
    "AIGatewayService",
    "AuthService",
    "CommentService",
    "BackendOperation",
    "SimulatedLatency",
    "ProjectService",
    "TaskService",
]

"""Team role hierarchy.

Role holds the shared identity (name, role label, level). Subclasses
override ``introduce`` and add their own action methods, each returning
a short description of the work rather than doing it.
"""
import logging
from typing import Optional
from models import LEVELS
from validator import Validator

logger = logging.getLogger(__name__)


class Role:
    def __init__(self, name: str, role: str, level: Optional[str] = None):
        self._name = name
        self._role = role
        # constructor level is stored as given; only the setter validates
        self._level = level

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def role(self) -> str:
        return self._role

    @property
    def level(self) -> Optional[str]:
        return self._level

    @level.setter
    def level(self, level: str) -> None:
        def apply() -> None:
            logger.debug("%s level %s -> %s", self._name, self._level, level)
            self._level = level
        Validator.validate(level, LEVELS, apply)

    @property
    def role_details(self) -> str:
        return f"Name: {self._name}\nRole: {self._role}\nExperience: {self._level}"

    def greeting(self) -> str:
        return f"Hi, my name is {self.name} and I am a {self.role}."

    def introduce(self) -> None:
        print(self.greeting())

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{type(self).__name__}(name={self._name}, level={self._level})"


class Developer(Role):
    def __init__(self, name: str, role: str = "Developer", level: Optional[str] = None):
        super().__init__(name, role, level)

    def create_integration(self) -> str:
        return "Integrate Frontend and Backend"

    def create_pr(self) -> str:
        return "Create Pull Request"

    def on_review(self) -> str:
        return "Review Pull Request"

    def on_testing(self) -> str:
        return "QA Testing"

    def reject_pr(self) -> str:
        return "Reject Pull Request"

    def approve_pr(self) -> str:
        return "Approve Pull Request"

    def create_deployment(self) -> str:
        return "Deploy Application"


class BackEnd(Developer):
    def __init__(self, name: str, level: Optional[str] = None):
        super().__init__(name, "BackEnd Developer", level)

    def introduce(self) -> None:
        print(f"{self.greeting()} I love to create backend systems.")

    def set_up_server(self) -> str:
        return "Set Up Server"

    def create_db(self) -> str:
        return "Create Database"

    def create_business_logic(self) -> str:
        return "Create Business Logic"


class FrontEnd(Developer):
    def __init__(self, name: str, level: Optional[str] = None):
        super().__init__(name, "FrontEnd Developer", level)

    def introduce(self) -> None:
        print(f"{self.greeting()} I love to create beautiful user interfaces.")

    def create_ui(self) -> str:
        return "Implement UI Components"

    def create_ux(self) -> str:
        return "Implement User Interactions"

    def create_style(self) -> str:
        return "Implement Styling"


class FullStack(Developer):
    """Developer covering both sides by delegating to owned BackEnd/FrontEnd."""

    def __init__(self, name: str, level: Optional[str] = None):
        super().__init__(name, "FullStack Developer", level)
        self.back_end = BackEnd(name, level)
        self.front_end = FrontEnd(name, level)

    def introduce(self) -> None:
        print(f"{self.greeting()} I love to create fullstack applications.")

    # ---- backend ----
    def set_up_server(self) -> str:
        return self.back_end.set_up_server()

    def create_db(self) -> str:
        return self.back_end.create_db()

    def create_business_logic(self) -> str:
        return self.back_end.create_business_logic()

    # ---- frontend ----
    def create_ui(self) -> str:
        return self.front_end.create_ui()

    def create_ux(self) -> str:
        return self.front_end.create_ux()

    def create_style(self) -> str:
        return self.front_end.create_style()


class UiUxDesigner(Role):
    def __init__(self, name: str, level: Optional[str] = None):
        super().__init__(name, "UI/UX Designer", level)

    def introduce(self) -> None:
        print(f"{self.greeting()} I love to design user interfaces.")

    def create_wireframes(self) -> str:
        return "Create Wireframes"

    def create_design(self) -> str:
        return "Create Design"

    def create_prototypes(self) -> str:
        return "Create Prototypes"

    def create_system_architecture(self) -> str:
        return "Create System Architecture"


class QaTester(Role):
    def __init__(self, name: str, level: Optional[str] = None):
        super().__init__(name, "QA Tester", level)

    def introduce(self) -> None:
        print(f"{self.greeting()} I love to test user interfaces.")

    def run_unit_tests(self) -> str:
        return "Run Unit Tests"

    def run_integration_tests(self) -> str:
        return "Run Integration Tests"

    def run_performance_tests(self) -> str:
        return "Run Performance Tests"

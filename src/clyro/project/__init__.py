from clyro.project.frameworks import FRAMEWORKS, Framework
from clyro.project.info import ProjectInfo, get_project_info, get_tailwind_version
from clyro.project.packages import (
    PackageManager,
    build_install_command,
    detect_package_manager,
    install_packages,
)

__all__ = [
    "FRAMEWORKS",
    "Framework",
    "ProjectInfo",
    "get_project_info",
    "get_tailwind_version",
    "PackageManager",
    "build_install_command",
    "detect_package_manager",
    "install_packages",
]

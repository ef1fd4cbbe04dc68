from fastapi import APIRouter, Depends

from ...dependencies import get_admin_shell
from ...schemas.notification import notifications_payload
from ...schemas.pages import AdminSessionRead
from ...views.admin_shell import AdminShell


router = APIRouter(prefix="/admin", tags=["admin-session"])


def _session_state(shell: AdminShell) -> AdminSessionRead:
    return AdminSessionRead(
        state=shell.state.value,
        redirect_to=shell.redirect_to,
        user_id=shell.session.user_id if shell.session else None,
        email=shell.session.email if shell.session else None,
        tabs=list(shell.tabs),
        notifications=notifications_payload(shell.notifier),
    )


@router.get("/session", response_model=AdminSessionRead)
async def check_admin_session(shell: AdminShell = Depends(get_admin_shell)) -> AdminSessionRead:
    """
    Run the admin gate: `authorized` with the manager tabs, or `redirecting`
    to the sign-in page. A session without the admin role is signed out.
    """
    await shell.check()
    return _session_state(shell)


@router.post("/logout", response_model=AdminSessionRead)
async def logout(shell: AdminShell = Depends(get_admin_shell)) -> AdminSessionRead:
    await shell.logout()
    return _session_state(shell)

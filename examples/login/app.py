"""Login — guarding routes with before() middleware.

``LoginRequired`` sends anonymous visitors to the login page and
``GuestOnly`` keeps signed-in users away from it. Sessions live in an
in-memory dict keyed by the ``SESSION-ID`` cookie.
"""

from minimvc import App, Request
from minimvc.middleware import GuestOnly, LoginRequired

SESSIONS: dict[str, str] = {"s3cr3t": "eko"}


def current_user(request: Request) -> str | None:
    return SESSIONS.get(request.cookies.get("SESSION-ID", ""))


class HomeController:
    def index(self) -> str:
        return "Home"


class UserController:
    def login(self) -> str:
        return "Login form"

    def profile(self) -> str:
        return "Your profile"


require_login = LoginRequired(current_user, login_url="/users/login")

app = App()
app.get("/", (HomeController, "index"))
app.get("/users/login", (UserController, "login"), [GuestOnly(current_user)])
app.get("/users/profile", (UserController, "profile"), [require_login])

"""
Web interface for the task dashboard
"""

from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request, Form, HTTPException, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from taskboard.api.backend_client import BackendClient
from taskboard.config.constants import STATUS_CHOICES, PRIORITY_CHOICES
from taskboard.config.settings import settings
from taskboard.services.change_feed import PollingChangeFeed
from taskboard.services.dashboard import Dashboard
from taskboard.utils import formatters
from taskboard.utils.error_handler import ValidationError
from taskboard.utils.logger import logger

app = FastAPI(title="Task Dashboard")
templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


class WebDashboard:
    """Dashboard instance served by the web app"""

    def __init__(self):
        self.dashboard: Optional[Dashboard] = None
        self.logger = logger

    async def initialize(self):
        """Build dashboard from settings and start following changes"""
        settings.validate()
        client = BackendClient()
        feed = PollingChangeFeed(client)
        self.dashboard = Dashboard(client, feed, settings.session())
        await self.dashboard.start()

    async def shutdown(self):
        if self.dashboard is None:
            return
        await self.dashboard.stop()
        await self.dashboard.feed.close()
        await self.dashboard.client.close()


# Global dashboard instance
web_dashboard = WebDashboard()


def get_dashboard() -> Dashboard:
    if web_dashboard.dashboard is None:
        raise HTTPException(status_code=503, detail="Dashboard is not initialized")
    return web_dashboard.dashboard


def _task_json(task) -> dict:
    data = task.model_dump(mode="json")
    data["status_label"] = formatters.format_status(task.status)
    data["priority_variant"] = formatters.priority_variant(task.priority)
    data["status_icon"] = formatters.status_icon(task.status)
    return data


@app.on_event("startup")
async def startup():
    """Initialize on startup"""
    try:
        logger.info("[Startup] Initializing dashboard...")
        await web_dashboard.initialize()
        logger.info("Dashboard initialized successfully")
    except Exception as e:
        logger.error(f"[Startup] Error initializing dashboard: {e}", exc_info=True)
        raise


@app.on_event("shutdown")
async def shutdown():
    await web_dashboard.shutdown()


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    search: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Main page"""
    dashboard.set_filters(search, status, priority)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "dashboard": dashboard,
            "tasks": dashboard.visible_tasks(),
            "stats": dashboard.task_list.stats(),
            "notifications": dashboard.notifier.drain(),
            "fmt": formatters,
            "statuses": STATUS_CHOICES,
            "priorities": PRIORITY_CHOICES,
        },
    )


@app.get("/api/tasks")
async def list_tasks(
    search: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Filtered task list for this request's filters"""
    tasks = dashboard.filtered_tasks(search, status, priority)
    return {
        "loading": dashboard.loading,
        "tasks": [_task_json(task) for task in tasks],
        "empty_message": dashboard.empty_message(tasks),
    }


@app.get("/api/stats")
async def task_stats(dashboard: Dashboard = Depends(get_dashboard)):
    return dashboard.task_list.stats().model_dump()


def _reply(result: dict, next_url: Optional[str]):
    """JSON result, or a redirect back to the page for HTML form posts"""
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return RedirectResponse(next_url, status_code=303)
    return result


async def _submit_task_form(dashboard: Dashboard, next_url: Optional[str]):
    try:
        ok = await dashboard.save_task()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _reply({"success": ok}, next_url)


@app.post("/api/tasks")
async def create_task(
    title: str = Form(""),
    description: str = Form(""),
    status: str = Form("pending"),
    priority: str = Form("medium"),
    due_date: str = Form(""),
    next_url: Optional[str] = Form(None, alias="next"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Create task through the task form"""
    dashboard.task_form.open_for_create()
    dashboard.task_form.set(
        title=title,
        description=description,
        status=status,
        priority=priority,
        due_date=due_date,
    )
    return await _submit_task_form(dashboard, next_url)


@app.post("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    priority: Optional[str] = Form(None),
    due_date: Optional[str] = Form(None),
    next_url: Optional[str] = Form(None, alias="next"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Edit task through the task form; omitted fields keep the task's values"""
    task = dashboard.find_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")

    supplied = {
        "title": title,
        "description": description,
        "status": status,
        "priority": priority,
        "due_date": due_date,
    }
    dashboard.task_form.open_for_edit(task)
    dashboard.task_form.set(**{name: value for name, value in supplied.items() if value is not None})
    return await _submit_task_form(dashboard, next_url)


@app.delete("/api/tasks/{task_id}")
async def delete_task(task_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    return {"success": await dashboard.delete_task(task_id)}


@app.post("/api/tasks/{task_id}/delete")
async def delete_task_form(
    task_id: str,
    next_url: Optional[str] = Form(None, alias="next"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Delete task from an HTML form"""
    return _reply({"success": await dashboard.delete_task(task_id)}, next_url)


@app.get("/api/profile")
async def get_profile(dashboard: Dashboard = Depends(get_dashboard)):
    profile = dashboard.profiles.profile
    return {
        "display_name": dashboard.profiles.display_name,
        "profile": profile.model_dump() if profile else None,
    }


@app.post("/api/profile")
async def update_profile(
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    next_url: Optional[str] = Form(None, alias="next"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Save profile through the profile form"""
    dashboard.profile_form.open()
    dashboard.profile_form.set(first_name=first_name, last_name=last_name, email=email)
    return _reply({"success": await dashboard.save_profile()}, next_url)


@app.post("/api/sign-out")
async def sign_out(
    next_url: Optional[str] = Form(None, alias="next"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    return _reply({"success": await dashboard.sign_out()}, next_url)


@app.get("/api/notifications")
async def notifications(dashboard: Dashboard = Depends(get_dashboard)):
    """Pending notifications (each is returned once)"""
    return [n.model_dump() for n in dashboard.notifier.drain()]


@app.delete("/api/notifications/{notification_id}")
async def dismiss_notification(notification_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    return {"success": dashboard.notifier.dismiss(notification_id)}


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.WEB_PORT)

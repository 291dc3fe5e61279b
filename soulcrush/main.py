import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from soulcrush.api.routes import applications, companies, health
from soulcrush.core import config


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Soulcrush Job Applications")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(applications.router)
app.include_router(companies.router)
app.include_router(health.router)


# ============================================
# ✅ ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Soulcrush API running"}


# ============================================
# ✅ SITE FILES
# ============================================

def mount_site(application: FastAPI, site_root: str = config.SITE_ROOT) -> bool:
    """
    Serve files from the site root at `/`.
    
    Must run after every route is registered: the mount catches all paths
    the routes do not.
    """
    if not os.path.isdir(site_root):
        return False
    application.mount("/", StaticFiles(directory=site_root, html=True), name="site")
    return True


mount_site(app)

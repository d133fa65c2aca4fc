# vault_pages/api/vault/pages.py
from flask import abort, current_app, redirect, request, url_for
from vault_pages.application.pages.change_status import change_page_status
from vault_pages.application.pages.delete_page import delete_page as delete_page_service
from vault_pages.application.pages.rollback_revision import rollback_revision
from vault_pages.application.pages.save_page import set_fields_and_save
from vault_pages.domain.lifecycle.page import get_statuses
from vault_pages.normalizers.listing import pages_listing, revisions_listing
from vault_pages.normalizers.page import normalize_page
from vault_pages.normalizers.revision import normalize_revision
from vault_pages.repositories import pages, revisions
from vault_pages.requests.page_request import PageRequest
from vault_pages.security.guard import PermissionContext, get_guard
from vault_pages.utils.decorators import current_editor, editor_required
from vault_pages.utils.i18n import say
from vault_pages.utils.optimistic_lock import enforce_optimistic_lock
from vault_pages.utils.redirects import action_page_redirect, delete_page_redirect
from vault_pages.utils.responses import action_result, is_async_request, redirect_action, render
from . import vault_bp


def _page_or_404(page_id):
    page = pages.find_by_pk(page_id)
    if page is None:
        abort(404, description=say("Page not found."))
    return page


def _revision_or_404(revision_id):
    revision = revisions.find_by_pk(revision_id)
    if revision is None:
        abort(404, description=say("Revision not found."))
    return revision


def _form_data():
    if request.form:
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ------------------------
# Views
# ------------------------

@vault_bp.route("/pages", methods=["GET"])
@editor_required
def index():
    editor = current_editor()
    get_guard().allows(editor, "view")

    statuses = get_statuses()
    listing = pages_listing(
        request.args,
        statuses,
        per_page=current_app.config["VAULT_PER_PAGE"],
        max_per_page=current_app.config["VAULT_MAX_PER_PAGE"],
    )

    return render("pages:list", listing=listing, statuses=statuses.labels())


@vault_bp.route("/pages/add", methods=["GET"])
@editor_required
def add():
    editor = current_editor()
    get_guard().allows(editor, "add")

    statuses = get_statuses()
    return render(
        "pages:create",
        statuses=statuses.labels(),
        page=normalize_page(pages.create(), statuses),
    )


@vault_bp.route("/pages/copy/<page_id>", methods=["GET"])
@editor_required
def create_from_page(page_id):
    editor = current_editor()
    page = _page_or_404(page_id)

    get_guard().allows(editor, "add")

    statuses = get_statuses()
    return render(
        "pages:create",
        statuses=statuses.labels(),
        page=normalize_page(page, statuses),
        is_copy=True,
        copied_from={"type": "page", "id": page.id},
    )


@vault_bp.route("/pages/revisions/<revision_id>/copy", methods=["GET"])
@editor_required
def create_from_revision(revision_id):
    editor = current_editor()
    revision = _revision_or_404(revision_id)

    get_guard().allows(editor, "add")

    statuses = get_statuses()
    page = pages.create_from_revision(revision)

    return render(
        "pages:create",
        statuses=statuses.labels(),
        page=normalize_page(page, statuses),
        is_copy=True,
        copied_from={"type": "revision", "id": revision.id},
    )


@vault_bp.route("/pages/revisions/<revision_id>", methods=["GET"])
@editor_required
def view_revision(revision_id):
    editor = current_editor()
    revision = _revision_or_404(revision_id)

    get_guard().allows(editor, "viewRevision", PermissionContext(revision))

    return render("pages:revision", revision=normalize_revision(revision, include_snapshot=True))


@vault_bp.route("/pages/edit/<page_id>", methods=["GET"])
@editor_required
def edit(page_id):
    editor = current_editor()
    page = _page_or_404(page_id)

    get_guard().allows(editor, "view", PermissionContext(page))

    statuses = get_statuses()
    return render(
        "pages:edit",
        page=normalize_page(page, statuses),
        revisions=revisions_listing(revisions.find_by_page(page)),
        statuses=statuses.labels(),
    )


# ------------------------
# Actions
# ------------------------

@vault_bp.route("/pages/action/<page_id>", methods=["POST"])
@editor_required
def action(page_id):
    editor = current_editor()
    page = _page_or_404(page_id)

    get_guard().allows(editor, "update", PermissionContext(page))

    change_page_status(page=page, status=request.args.get("status"), editor=editor)

    if is_async_request():
        return action_result(200, message=say("Page status changed."), action="refresh")

    return redirect(action_page_redirect(request.referrer, url_for("vault.index")))


@vault_bp.route("/pages/delete/<page_id>", methods=["POST"])
@editor_required
def delete(page_id):
    editor = current_editor()
    page = _page_or_404(page_id)

    get_guard().allows(editor, "delete", PermissionContext(page))

    edit_uri = url_for("vault.edit", page_id=page.id)
    delete_page_service(page=page, editor=editor)

    if is_async_request():
        return action_result(200, message=say("Page deleted."), action="refresh")

    return redirect(delete_page_redirect(edit_uri, request.referrer, url_for("vault.index")))


@vault_bp.route("/pages/update/<page_id>", methods=["POST"])
@editor_required
def update(page_id):
    editor = current_editor()
    page = _page_or_404(page_id)

    get_guard().allows(editor, "update", PermissionContext(page))

    enforce_optimistic_lock(page)

    form = PageRequest(_form_data(), statuses=get_statuses(), entity=page)
    if not form.is_valid():
        return action_result(400, errors=form.get_errors())

    set_fields_and_save(page=page, fields=form.get_fields(), editor=editor)

    return action_result(200, message=say("Page updated."))


@vault_bp.route("/pages/revisions/<revision_id>/apply", methods=["POST"])
@editor_required
def apply_revision(revision_id):
    editor = current_editor()
    revision = _revision_or_404(revision_id)

    page = revision.live_page
    if page is None:
        abort(404, description=say("Page not found."))

    get_guard().allows(editor, "applyRevision", PermissionContext(page))

    rollback_revision(page=page, revision=revision, editor=editor)

    uri = url_for("vault.edit", page_id=page.id)
    if is_async_request():
        return action_result(200, message=say("Page rolled back."), action=redirect_action(uri))

    return redirect(uri)


@vault_bp.route("/pages/create", methods=["POST"])
@editor_required
def create():
    editor = current_editor()
    get_guard().allows(editor, "add")

    form = PageRequest(_form_data(), statuses=get_statuses())
    if not form.is_valid():
        return action_result(400, errors=form.get_errors())

    page = pages.create()
    set_fields_and_save(page=page, fields=form.get_fields(), editor=editor)

    return action_result(201, action=redirect_action(url_for("vault.edit", page_id=page.id)))

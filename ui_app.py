import asyncio

import streamlit as st

from config.settings import settings
from core.logging import configure_logging
from models.schemas import UserForm
from services.contacts import filter_users, group_by_initial
from services.validation import PHONE_MAX_LENGTH, accept_phone_input, validate_form
from viewmodel.user_viewmodel import UserViewModel

st.set_page_config(page_title="Contacts", layout="centered")

PAGE_LIST = "user_list"
PAGE_DETAIL = "user_detail"
PAGE_CREATE = "user_create"
PAGE_EDIT = "user_edit"


def run(coro):
    """Each UI action is one awaited view-model call."""
    return asyncio.run(coro)


# ---------------- Session init ----------------

if "vm" not in st.session_state:
    configure_logging()
    st.session_state.vm = UserViewModel()
    run(st.session_state.vm.load_users())

if "page" not in st.session_state:
    st.session_state.page = PAGE_LIST
    st.session_state.user_id = None

vm: UserViewModel = st.session_state.vm


def navigate(page: str, user_id: int | None = None):
    st.session_state.page = page
    st.session_state.user_id = user_id
    st.session_state.pop("form_loaded_for", None)
    st.session_state.pop("detail_loaded_for", None)


def show_messages():
    """Transient, dismissible error/success messages."""
    if vm.error.value:
        col1, col2 = st.columns([5, 1])
        with col1:
            st.error(vm.error.value)
        with col2:
            if st.button("Dismiss", key="dismiss_error"):
                vm.clear_messages()
                st.rerun()
    if vm.success_message.value:
        col1, col2 = st.columns([5, 1])
        with col1:
            st.success(vm.success_message.value)
        with col2:
            if st.button("OK", key="dismiss_success"):
                vm.clear_messages()
                st.rerun()


# ---------------- Pages ----------------

def page_list():
    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown("### Contacts")
    with col2:
        if st.button("Refresh", disabled=vm.is_loading.value, use_container_width=True):
            run(vm.load_users())
            st.rerun()

    show_messages()

    query = st.text_input("Search", placeholder="Name, email or phone", key="search_query")
    if st.button("New contact", disabled=vm.is_loading.value):
        navigate(PAGE_CREATE)
        st.rerun()

    users = filter_users(vm.users.value, query.strip())
    if not users:
        st.info("No contacts yet." if not query else f"No contacts match '{query}'.")
        return

    for letter, contacts in group_by_initial(users).items():
        st.markdown(f"#### {letter}")
        for user in contacts:
            col1, col2 = st.columns([4, 1])
            with col1:
                st.write(f"**{user.name}**  \n{user.phone} · {user.email}")
            with col2:
                if st.button("Open", key=f"open_{user.id}"):
                    navigate(PAGE_DETAIL, user.id)
                    st.rerun()


def page_detail():
    user_id = st.session_state.user_id
    # Fetch once per visit; reruns (e.g. dismissing an error) reuse the result
    if st.session_state.get("detail_loaded_for") != user_id:
        run(vm.load_user(user_id))
        st.session_state.detail_loaded_for = user_id
    selected = vm.selected_user.value

    if st.button("Back"):
        navigate(PAGE_LIST)
        st.rerun()

    show_messages()

    if selected is None or selected.id != user_id:
        st.warning("Contact could not be loaded.")
        return

    st.markdown(f"### {selected.name}")
    if selected.image_url:
        st.image(selected.image_url, width=160)
    st.write(f"Phone: **{selected.phone}**")
    st.write(f"Email: **{selected.email}**")
    if selected.created_at:
        st.caption(f"Created {selected.created_at} · updated {selected.updated_at or '-'}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Edit", disabled=vm.is_loading.value, use_container_width=True):
            navigate(PAGE_EDIT, user_id)
            st.rerun()
    with col2:
        confirm = st.checkbox("Confirm delete")
        if st.button("Delete", disabled=vm.is_loading.value or not confirm, use_container_width=True):
            run(vm.delete_user(user_id, on_success=lambda: navigate(PAGE_LIST)))
            st.rerun()


def _fill_form(form: UserForm):
    st.session_state.form_name = form.name
    st.session_state.form_email = form.email
    st.session_state.form_phone = form.phone
    st.session_state.form_phone_prev = form.phone
    st.session_state.form_image_url = form.image_url


def _on_phone_change():
    prev = st.session_state.get("form_phone_prev", "")
    accepted = accept_phone_input(prev, st.session_state.form_phone)
    st.session_state.form_phone = accepted
    st.session_state.form_phone_prev = accepted


def page_form():
    user_id = st.session_state.user_id
    is_edit = st.session_state.page == PAGE_EDIT

    # Pre-fill once per visit: existing user in edit mode, blanks otherwise
    if st.session_state.get("form_loaded_for") != (st.session_state.page, user_id):
        if is_edit:
            run(vm.load_user(user_id))
            selected = vm.selected_user.value
            found = selected is not None and selected.id == user_id
            _fill_form(UserForm.from_user(selected) if found else UserForm())
            st.session_state.form_source_missing = not found
        else:
            _fill_form(UserForm())
            st.session_state.form_source_missing = False
        st.session_state.form_errors = {}
        st.session_state.form_loaded_for = (st.session_state.page, user_id)

    if st.button("Cancel"):
        navigate(PAGE_DETAIL if is_edit else PAGE_LIST, user_id)
        st.rerun()

    st.markdown("### Edit contact" if is_edit else "### New contact")
    show_messages()

    source_missing = is_edit and st.session_state.get("form_source_missing", False)
    if source_missing:
        st.warning("Contact could not be loaded.")

    errors = st.session_state.get("form_errors", {})

    st.text_input("Name", key="form_name")
    if errors.get("name"):
        st.caption(f":red[{errors['name']}]")

    st.text_input("Phone", key="form_phone", on_change=_on_phone_change)
    if errors.get("phone"):
        st.caption(f":red[{errors['phone']}]")
    else:
        st.caption(f"{len(st.session_state.form_phone)}/{PHONE_MAX_LENGTH} digits")

    st.text_input("Email", key="form_email")
    if errors.get("email"):
        st.caption(f":red[{errors['email']}]")

    st.text_input("Image URL (optional)", key="form_image_url")

    label = "Save changes" if is_edit else "Create contact"
    if st.button(label, type="primary", key="submit_form", disabled=vm.is_loading.value or source_missing):
        form = UserForm(
            name=st.session_state.form_name,
            email=st.session_state.form_email,
            phone=st.session_state.form_phone,
            image_url=st.session_state.form_image_url,
        )
        validation = validate_form(form)
        st.session_state.form_errors = validation.errors()
        if validation.is_valid:
            user = form.to_user()
            if is_edit:
                run(vm.update_user(user_id, user, on_success=lambda: navigate(PAGE_DETAIL, user_id)))
            else:
                run(vm.create_user(user, on_success=lambda: navigate(PAGE_LIST)))
        st.rerun()


# ---------------- Router ----------------

st.sidebar.caption(f"API: {settings.CONTACTS_API_BASE_URL}")

page = st.session_state.page

if page == PAGE_LIST:
    page_list()
elif page == PAGE_DETAIL:
    page_detail()
elif page in (PAGE_CREATE, PAGE_EDIT):
    page_form()

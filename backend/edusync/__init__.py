"""EduSync school-management back end."""

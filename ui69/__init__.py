"""
ui69: copy unstyled, accessible React Native UI components into a project.

Components are plain source files bundled with this package. The CLI copies
them into the current project and lists the npm packages they need.
"""

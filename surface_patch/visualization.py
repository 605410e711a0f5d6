"""
Optional plotting of a finished patch.
"""
from surface_patch import exception


def patch(structure, plot_type="scatter"):
    """
    Plot the patch atoms against the rest of the structure. Needs the output
    membership column so call it after the patch has been cleaned up.
    """
    if plot_type == "scatter":
        inside = structure.membership == 1.0
        scatter(structure.coords[~inside], structure.coords[inside])
    else:
        raise exception.InvalidPlotType(("scatter",))


def scatter(*coords):
    """
    Simple matplotlib function to plot any number of arrays of cartesian
    (x,y,z) coords each will be colored different by default.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError as import_error:
        raise ImportError(
            "Library matplotlib is not installed please install and run again."
        ) from import_error
    fig = plt.figure()
    ax_subplot = fig.add_subplot(111, projection='3d')
    for coord in coords:
        ax_subplot.scatter3D(*coord.T)
    plt.show()

PRIMARY_BLUE = '#1d4ed8'
SELECTED_BAR = '#2563eb'
UNSELECTED_BAR = '#60a5fa'

# Doughnut slices take colours by position in the filtered sequence
SLICE_COLOURS = ['#0088FE', '#00C49F', '#FFBB28']

TEXT_DARK = '#1f2937'
AXIS_GREY = '#6b7280'
BORDER_GREY = '#e5e7eb'
BACKGROUND = '#f9fafb'
WHITE = '#ffffff'

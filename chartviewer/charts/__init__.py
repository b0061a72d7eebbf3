"""Bar, pie and scatter chart drawers for matplotlib figures."""
from beanctx import component


@component
class Widget:
    pass

import inflection


def pluralize(word):
    return inflection.pluralize(str(word))


def singularize(word):
    return inflection.singularize(str(word))


def classify(name):
    """
    Convert an association or attribute name to a class name: ``'members'`` becomes ``'Member'``.
    """
    return inflection.camelize(singularize(name))


def element_name(class_name):
    return inflection.underscore(class_name)


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__
